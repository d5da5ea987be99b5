
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'dictpatch_config'


class DictpatchConfigurable(HasTraits):

    def configured_traits(self, cls):
        "Values of the config traits declared on cls itself."
        return {name: getattr(self, name)
                for name in cls.class_own_traits(config=True)}


_config_cache = {}

def config_instance(cls):
    if cls not in _config_cache:
        _config_cache[cls] = cls()
    return _config_cache[cls]


def merge_config(target, new, include_none):
    """Merge the nested dict new into target.

    Unless include_none is set, None values remove their key and
    sections left empty are dropped.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            section = target.setdefault(key, {})
            merge_config(section, value, include_none)
            if not section and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def config_search_path():
    "Directories searched for config files, highest priority first."
    return [os.getcwd()] + jupyter_config_path()


def load_disk_config(include_none=False):
    "Merge every dictpatch_config.json on the search path, lowest priority first."
    merged = {}
    for directory in reversed(config_search_path()):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            merge_config(merged, loader.load_config(), include_none)
        except ConfigFileNotFound:
            continue
    return merged


def build_config(entrypoint, include_none=False):
    """Effective config of an entrypoint: trait defaults overlaid by disk config.

    Configurable classes are applied from the most generic to the
    most specific, so a subclass section wins over its base.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables)
        ))

    disk_config = load_disk_config(include_none)
    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, DictpatchConfigurable):
            continue
        merge_config(config, config_instance(cls).configured_traits(cls), include_none)
        merge_config(config, disk_config.get(cls.__name__, {}), include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(DictpatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Patch(Global):

    strict = Bool(
        False,
        help="fail on diff entries with an unknown action instead of "
             "skipping them.",
    ).tag(config=True)

    indent = Integer(
        None,
        allow_none=True,
        help="indentation of the JSON output. Default is compact output.",
    ).tag(config=True)


entrypoint_configurables = {
    'dictpatch': Patch,
}
