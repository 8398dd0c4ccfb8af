class StaticUrlError(Exception):
    """ Base exception for everything staticurl raises """
    pass


class ConfigError(StaticUrlError):
    """ config.json could not be read or parsed, callers fall back to defaults """
    pass


class BuildError(StaticUrlError):
    """ Fatal build failure, the build stops where it is """
    pass
