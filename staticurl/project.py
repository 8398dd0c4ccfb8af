import logging
import os

from dataclasses import dataclass
from typing import Iterator

from .assets import DEFAULT_CONFIG, read_asset
from .errors import BuildError

log = logging.getLogger(__name__)


@dataclass
class UrlRecord:
    code: str
    url: str


def init_site(sitename: str) -> None:
    """ Scaffold <sitename>/urls and <sitename>/config.json """
    urlsdir = os.path.join(sitename, "urls")
    try:
        os.makedirs(urlsdir, exist_ok=True)
    except OSError as e:
        log.debug(f"Could not create {urlsdir}: {e}")

    configpath = os.path.join(sitename, "config.json")
    try:
        with open(configpath, "wb") as f:
            f.write(read_asset(DEFAULT_CONFIG))
    except OSError:
        log.warning("Failed to create config.json; project will be using default values")
        return

    log.info(f"Created new site at {sitename}")


def read_record(path: str) -> UrlRecord:
    """ The file name is the short code, the first line is where it points to """
    try:
        with open(path, "rb") as f:
            line = f.readline()
    except OSError as e:
        raise BuildError(f"Failed to read file {path} ({e})")

    # Lines end at \n only, a lone \r stays part of the url
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]

    try:
        url = line.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BuildError(f"Failed to read file {path} ({e})")

    return UrlRecord(code=os.path.basename(path), url=url)


def scan_urls(urldir: str) -> Iterator[UrlRecord]:
    """
    List the url directory right away and hand back a generator over its files.

    Listing happens before the first record is produced, so an unreadable or
    empty directory fails the build before anything is written.
    Subdirectories are skipped.
    """
    try:
        with os.scandir(urldir) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        raise BuildError("Err : cannot read url directory")

    if not entries:
        raise BuildError("URLs directory is empty")

    def records():
        for entry in entries:
            if not entry.is_file():
                continue
            yield read_record(entry.path)

    return records()
