import importlib.metadata


def user_agent_value() -> str:
    try:
        version = importlib.metadata.version("httpreq")
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"

    return f"httpreq/{version}"
