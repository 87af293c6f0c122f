"""Search paths over standard per-user and site-wide directories."""

from platformdirs import PlatformDirs

from search_path.models import SearchPath


def config_search_path(appname: str, appauthor: str | None = None) -> SearchPath:
    """Get config directories for an application, most specific first.

    The user config directory comes first, followed by every site config
    directory (e.g. each entry of $XDG_CONFIG_DIRS on Linux).

    Args:
        appname: Application name, as passed to platformdirs
        appauthor: Application author (only used on Windows)
    """
    dirs = PlatformDirs(appname, appauthor, multipath=True)
    search_path = SearchPath.from_text(dirs.site_config_dir)
    search_path.prepend(dirs.user_config_dir)
    return search_path


def data_search_path(appname: str, appauthor: str | None = None) -> SearchPath:
    """Get data directories for an application, most specific first.

    Args:
        appname: Application name, as passed to platformdirs
        appauthor: Application author (only used on Windows)
    """
    dirs = PlatformDirs(appname, appauthor, multipath=True)
    search_path = SearchPath.from_text(dirs.site_data_dir)
    search_path.prepend(dirs.user_data_dir)
    return search_path
