__version__ = "0.1.0"

from .builder_api import Builder, build  # noqa: F401
from .config import Config, load_config  # noqa: F401
from .errors import StaticUrlError, ConfigError, BuildError  # noqa: F401
from .project import UrlRecord, init_site, read_record, scan_urls  # noqa: F401
