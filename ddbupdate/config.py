
import os

from traitlets import Unicode, Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .locking import CONDITIONS, DEFAULT_VERSION_PATH


CONFIG_BASENAME = 'ddbupdate_config'


class DdbUpdateConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for config files, in descending priority order."""
    return [os.getcwd(), os.path.join(os.path.expanduser('~'), '.ddbupdate')]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, DdbUpdateConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(DdbUpdateConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Diffing(Global):

    orphans = Bool(
        False,
        help="list every new leaf on its own, instead of the root of each "
             "new subtree.",
    ).tag(config=True)


class _Compiling(_Diffing):

    support_sets = Bool(
        False,
        help="route deleted numeric or string list elements to a DELETE "
             "clause, as elements of set attributes (best effort guess).",
    ).tag(config=True)

    prefix = Unicode(
        None,
        allow_none=True,
        help="prefix for all placeholder aliases.",
    ).tag(config=True)


class _Locking(DdbUpdateConfigurable):

    version_path = Unicode(
        DEFAULT_VERSION_PATH,
        help="path of the version attribute to condition the update on.",
    ).tag(config=True)

    condition = Enum(
        CONDITIONS,
        '=',
        help="operator comparing the stored version with the expected one.",
    ).tag(config=True)


class _Printing(DdbUpdateConfigurable):

    color = Bool(
        True,
        help="colorize the printed diff.",
    ).tag(config=True)


class DdbDiff(_Diffing, _Printing):
    pass


class DdbExpr(_Compiling, _Locking, _Printing):
    pass


entrypoint_configurables = {
    'ddbdiff': DdbDiff,
    'ddbexpr': DdbExpr,
}
