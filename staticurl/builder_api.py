import logging
import os

from flask import Flask
from jinja2 import Template, TemplateError

from .assets import FRONTPAGE, TEMPLATE, read_asset
from .config import Config, load_config
from .errors import BuildError
from .project import UrlRecord, scan_urls

log = logging.getLogger(__name__)


class Builder(Flask):
    def __init__(self, config: Config = None, cwd: str = None):
        self._config = config or Config.default()
        self._cwd = cwd or os.getcwd()

        # Templates come from the package, never from the project directory
        super().__init__(__name__, template_folder="templates", static_folder=None)

    @property
    def output(self) -> str:
        return os.path.join(self._cwd, self._config.output)

    @property
    def urldir(self) -> str:
        return os.path.join(self._cwd, self._config.urldir)

    def load_template(self) -> Template:
        try:
            return self.jinja_env.get_template(TEMPLATE)
        except TemplateError as e:
            raise BuildError(f"Failed to read Template file ({type(e).__name__}: {e})")

    def render_url(self, record: UrlRecord, template: Template = None) -> str:
        """ Render the redirect page for one record, values are HTML escaped """
        template = template or self.load_template()
        with self.app_context():
            return template.render(url=record.url, code=record.code)

    def _ensure_dir(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def write_page(self, record: UrlRecord, html: str) -> str:
        """ Write <output>/<code>/index.html, any failure stops the build """
        try:
            self._ensure_dir(self.output)
        except OSError:
            raise BuildError("Failed to create output directory")

        codedir = os.path.join(self.output, record.code)
        try:
            self._ensure_dir(codedir)
        except OSError:
            raise BuildError(f"Failed to create url directory for `{record.code}`")

        outputpath = os.path.join(codedir, "index.html")
        try:
            f = open(outputpath, "w", encoding="utf-8")
        except OSError:
            raise BuildError(f"Failed to create file for code -> {record.code}")

        with f:
            try:
                f.write(html)
            except OSError:
                raise BuildError(f"Failed to write to file for code -> {record.code}")

        return outputpath

    def write_frontpage(self) -> bool:
        """ Copy the bundled front page to <output>/index.html, failures only warn """
        try:
            self._ensure_dir(self.output)
        except OSError:
            log.warning("Failed to create front page")
            return False

        fpath = os.path.join(self.output, "index.html")
        try:
            f = open(fpath, "wb")
        except OSError:
            log.warning(f"Failed to create front page at -> {fpath}")
            return False

        with f:
            try:
                f.write(read_asset(FRONTPAGE))
            except OSError:
                log.warning(f"Failed to write to front page at -> {fpath}")
                return False

        return True

    def generate(self) -> int:
        """ Render every url file into the output directory, returns the page count """
        template = self.load_template()

        pages = 0
        for record in scan_urls(self.urldir):
            self.write_page(record, self.render_url(record, template))
            pages += 1

        self.write_frontpage()
        log.info(f"Built {pages} page(s) into {self._config.output}")
        return pages


def build(cwd: str = None) -> int:
    """ Build the project in the current directory using its config.json """
    cwd = cwd or os.getcwd()
    config, ok = load_config(os.path.join(cwd, "config.json"))
    if not ok:
        log.warning("Failed to read config file using default directories")
        config = Config.default()

    return Builder(config, cwd=cwd).generate()
