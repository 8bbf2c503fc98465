# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Configurable defaults of the treepatch command line tools.

Each command has a configurable class, found through
`entrypoint_configurables`. The classes form an inheritance chain
(e.g. Patch -> _Output -> Global), and settings are looked up in
treepatch_config.json files under the names of these classes:

    {
        "Global": {"log_level": "WARN"},
        "Patch": {"atomic": false}
    }

Settings of a subclass override those of its bases.
"""

import json
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import LOG_LEVELS


CONFIG_BASENAME = 'treepatch_config'


class TreepatchConfigurable(HasTraits):
    """Base of the classes holding configurable defaults.

    Only traits tagged with config=True are picked up.
    """

    @classmethod
    def own_config_names(cls):
        "Names of the config traits defined on cls itself, not inherited."
        return list(cls.class_own_traits(config=True))

    def configured_traits(self, cls):
        return {name: getattr(self, name) for name in cls.own_config_names()}


_config_cache = {}
def config_instance(cls):
    if cls not in _config_cache:
        _config_cache[cls] = cls()
    return _config_cache[cls]


def config_search_path():
    "Directories searched for config files, in descending priority."
    return [os.getcwd()] + jupyter_config_path()


def _load_config_files(basefilename, path):
    """Yield the config found in basefilename.json in each directory of path.

    Directories are visited in ascending priority.
    """
    for directory in reversed(path):
        loader = JSONFileConfigLoader(basefilename + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    Unless include_none is set, None values delete their keys and
    subdicts left empty are pruned.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            sub = target.setdefault(k, {})
            recursive_update(sub, v, include_none)
            if not sub and not include_none:
                del target[k]
        elif v is None and not include_none:
            target.pop(k, None)
        else:
            target[k] = v


def load_disk_config(include_none=False):
    "Combine all config files on the search path, keyed by class name."
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, config_search_path()):
        recursive_update(disk_config, c, include_none)
    return disk_config


def build_config(entrypoint, include_none=False):
    """Compute the effective config of an entrypoint.

    Trait defaults of the entrypoint's configurable and its bases are
    overridden by the sections named after those classes in any
    treepatch_config.json file found on the config search path.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        )) from None

    disk_config = load_disk_config(include_none)

    config = {}
    # Bases first, so that subclasses win
    for c in reversed(configurable.mro()):
        if not issubclass(c, TreepatchConfigurable):
            continue
        recursive_update(config, config_instance(c).configured_traits(c), include_none)
        recursive_update(config, disk_config.get(c.__name__, {}), include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


def format_config(entrypoint):
    """Effective config of entrypoint, for display.

    Returns a dict with the name of the entrypoint's configurable
    as key, and a dict of json formatted values.
    """
    config = build_config(entrypoint, True)
    return {
        entrypoint_configurables[entrypoint].__name__:
            {k: json.dumps(v) for k, v in config.items()},
    }


class Global(TreepatchConfigurable):

    log_level = Enum(
        LOG_LEVELS,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Output(Global):

    indent = Integer(
        2,
        help="Number of spaces to indent json output with.",
    ).tag(config=True)

    sort_keys = Bool(
        False,
        help="Sort object keys when writing json output.",
    ).tag(config=True)


class Diff(_Output):

    use_color = Bool(
        True,
        help="Whether to use ANSI colors when pretty-printing a patch.",
    ).tag(config=True)


class Patch(_Output):

    atomic = Bool(
        True,
        help="Revert all operations if one of them fails. When disabled, "
             "operations before the failing one stay applied.",
    ).tag(config=True)


class Merge(_Output):
    pass


entrypoint_configurables = {
    'tpdiff': Diff,
    'tppatch': Patch,
    'tpmerge': Merge,
}
