import os

import yaml

DEFAULT_LOCATIONS = [
    os.path.expanduser("~/.config/aurwalk/config.yaml"),
    "/etc/aurwalk/config.yaml",
]

DEFAULTS = {
    "general": {
        "max_results": 20,
        "cache_dir": "~/.cache/aurwalk",
        "show_disk_usage": True,
    },
    "aur": {
        "url": "https://aur.archlinux.org",
        "timeout": 15,
    },
    "logging": {
        "level": "info",
        "log_file": "~/.cache/aurwalk/aurwalk.log",
        "log_to_file": True,
        "log_to_console": False,
        "color_output": True,
        "log_format": "text",
        "max_log_size_kb": 1024,
    },
}


class ConfigError(Exception):
    pass


class AurConfig:
    def __init__(self, locations=None, lazy=False):
        if locations is None:
            locations = list(DEFAULT_LOCATIONS)
            env_path = os.environ.get("AURWALK_CONFIG")
            if env_path:
                locations.insert(0, env_path)
        self.locations = locations
        self._data = None
        self.loaded_from = None
        if not lazy:
            self.reload()

    @property
    def data(self):
        if self._data is None:
            self.reload()
        return self._data

    def ensure_loaded(self):
        """Read the configuration now so a broken file is reported up front."""
        return self.data

    def reload(self):
        """(Re)load the first existing file; defaults only when none exists."""
        data = {section: dict(values) for section, values in DEFAULTS.items()}
        loaded_from = None
        for path in self.locations:
            path = os.path.expanduser(path)
            if os.path.isfile(path):
                self._merge(data, self._read(path))
                loaded_from = path
                break
        self._data = data
        self.loaded_from = loaded_from

    def load_file(self, path):
        """Used by --config: an explicit file must exist."""
        path = os.path.expanduser(path)
        if not os.path.isfile(path):
            raise ConfigError(f"Config file not found: {path}")
        self.locations = [path]
        self.reload()

    def _read(self, path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping of sections")
        return data

    def _merge(self, target, data):
        for section, values in data.items():
            if not isinstance(values, dict):
                raise ConfigError(f"Section '{section}' must be a mapping")
            target.setdefault(section, {}).update(values)

    def get(self, section, option, fallback=None):
        value = self.data.get(section, {}).get(option)
        return fallback if value is None else value

    def getboolean(self, section, option, fallback=False):
        value = self.get(section, option, fallback=fallback)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("1", "yes", "true", "on"):
                return True
            if lowered in ("0", "no", "false", "off"):
                return False
        return fallback

    def getint(self, section, option, fallback=0):
        try:
            return int(self.get(section, option, fallback=fallback))
        except (TypeError, ValueError):
            return fallback

    def getpath(self, section, option, fallback=None):
        value = self.get(section, option, fallback=fallback)
        if value is None:
            return None
        return os.path.abspath(os.path.expanduser(str(value)))

    def __getitem__(self, section):
        if section in self.data:
            return dict(self.data[section])
        raise KeyError(f"Section '{section}' not found.")

    def __contains__(self, section):
        return section in self.data

# Shared default instance, read on first use
config = AurConfig(lazy=True)
