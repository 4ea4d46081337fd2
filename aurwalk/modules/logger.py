# aurwalk/modules/logger.py
"""
Per-component log records for aurwalk.

Every manager class keeps ``self.log = Logger("<component>")``. Records go to
the log file under the cache directory (text or JSON lines) and, when
``logging.log_to_console`` is set, are echoed to stderr through rich.
"""

import datetime
import json
import os
import threading

from rich.console import Console

from aurwalk.modules.config import config

SEVERITY = {"DEBUG": 10, "INFO": 20, "SUCCESS": 25, "WARNING": 30, "ERROR": 40}

STYLES = {"DEBUG": "dim", "INFO": "blue", "SUCCESS": "green", "WARNING": "yellow", "ERROR": "bold red"}

# one lock for every Logger, they all share the same file
_write_lock = threading.Lock()


class Logger:
    def __init__(self, name="aurwalk", settings=None):
        settings = settings or config
        self.name = name
        self.path = settings.getpath("logging", "log_file", fallback="~/.cache/aurwalk/aurwalk.log")
        self.to_file = settings.getboolean("logging", "log_to_file", fallback=True)
        self.to_console = settings.getboolean("logging", "log_to_console", fallback=False)
        self.as_json = str(settings.get("logging", "log_format", fallback="text")).lower() == "json"
        self.rotate_at = settings.getint("logging", "max_log_size_kb", fallback=0) * 1024
        threshold = str(settings.get("logging", "level", fallback="info")).upper()
        self.threshold = SEVERITY.get(threshold, SEVERITY["INFO"])
        self.console = None
        if self.to_console:
            color = settings.getboolean("logging", "color_output", fallback=True)
            self.console = Console(stderr=True, no_color=not color, highlight=False)
        if self.to_file:
            try:
                os.makedirs(os.path.dirname(self.path), exist_ok=True)
            except OSError as e:
                self._complain(f"cannot create log directory for {self.path}: {e}")
                self.to_file = False

    def render(self, level, message):
        stamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        if self.as_json:
            return json.dumps({"timestamp": stamp, "logger": self.name, "level": level, "message": message})
        return f"[{stamp}] [{self.name}] [{level}] {message}"

    def log(self, level, message):
        level = level.upper()
        if SEVERITY.get(level, 0) < self.threshold:
            return
        line = self.render(level, message)
        with _write_lock:
            if self.console is not None:
                self.console.print(line, style=STYLES.get(level), markup=False)
            if self.to_file:
                self._append(line)

    def _append(self, line):
        try:
            if self.rotate_at > 0 and os.path.exists(self.path) and os.path.getsize(self.path) > self.rotate_at:
                os.replace(self.path, self.path + ".1")
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            self._complain(f"cannot write {self.path}: {e}")
            self.to_file = False

    def _complain(self, text):
        Console(stderr=True).print(f"aurwalk logger: {text}", markup=False)

    def debug(self, message):
        self.log("DEBUG", message)

    def info(self, message):
        self.log("INFO", message)

    def success(self, message):
        self.log("SUCCESS", message)

    def warning(self, message):
        self.log("WARNING", message)

    def error(self, message):
        self.log("ERROR", message)
