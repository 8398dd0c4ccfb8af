import logging
from html.parser import HTMLParser

import pytest


class RedirectPage(HTMLParser):
    """ Pulls the interesting bits out of a rendered redirect page """

    def __init__(self, html: str):
        super().__init__()
        self.links = []
        self.refresh = None
        self.codes = []
        self.feed(html)

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == "a":
            self.links.append(attrs.get("href"))
        elif tag == "meta" and attrs.get("http-equiv") == "refresh":
            self.refresh = attrs.get("content")
        if "data-code" in attrs:
            self.codes.append(attrs["data-code"])


@pytest.fixture
def project(tmp_path, monkeypatch):
    """ An empty project directory that is also the working directory """
    monkeypatch.chdir(tmp_path)
    (tmp_path / "urls").mkdir()
    return tmp_path


def add_url(root, code, url, urldir="urls"):
    path = root / urldir / code
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(url + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """ The CLI binds a handler to whatever stdout was at the time, drop it afterwards """
    yield
    logger = logging.getLogger("staticurl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
