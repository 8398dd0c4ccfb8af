import pkgutil

TEMPLATE = "url.html"
FRONTPAGE = "front.html"
DEFAULT_CONFIG = "config.json"


def read_asset(name: str) -> bytes:
    """ Raw bytes of a file shipped in staticurl/templates """
    data = pkgutil.get_data("staticurl", f"templates/{name}")
    if data is None:
        raise FileNotFoundError(f"[-] Asset not found: {name}")
    return data
