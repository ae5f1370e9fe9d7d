import os
import ssl
from typing import Any, Dict, Optional

import certifi
import truststore

from .._config import Config


def _expand_path(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))


def create_ssl_context(
    trust_store: str = "system", ca_bundle: Optional[str] = None
) -> ssl.SSLContext:
    """Builds the TLS context used to verify servers.

    A ``ca_bundle`` file wins over ``trust_store``. Otherwise ``"system"`` uses
    the operating system certificates and ``"certifi"`` the Mozilla bundle.
    """
    if ca_bundle:
        return ssl.create_default_context(cafile=_expand_path(ca_bundle))
    if trust_store == "certifi":
        return ssl.create_default_context(cafile=certifi.where())
    return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


def get_httpx_client_kwargs(config: Config) -> Dict[str, Any]:
    """Get standardized httpx client configuration."""
    verify: Any = False
    if config.verify_ssl:
        verify = create_ssl_context(config.trust_store, config.ca_bundle)

    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx by default
    return {
        "follow_redirects": config.follow_redirects,
        "timeout": config.timeout,
        "verify": verify,
    }
