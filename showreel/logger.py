"""
Minimal logging context for Showreel.
Single place to control all diagnostic output: stderr + optional file, with flush.
Stdout is reserved for command results (the magnet printed by `fetch`).
"""
import json
import os
from pathlib import Path
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.text import Text


class ShowreelLogger:
    """Minimal logger: print to stderr + file, always flush"""

    def __init__(self, log_file: Optional[Path] = None, debug: bool = False, console: Optional[Console] = None):
        self.log_file = log_file
        self._file_handle = None
        self._start_time = datetime.now()
        self.debug_mode = debug
        self._console = console or Console(stderr=True, highlight=False)
        self._retry_note_services: set[str] = set()

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_file, 'a', buffering=1, encoding='utf-8')  # Line buffered, UTF-8
            from showreel import __version__
            self._write_file(f"({self._start_time.strftime('%H:%M:%S')}  Started Showreel {__version__})")

    def log(self, msg: str, prefix: str = ""):
        """Log to screen and file"""
        output = f"{prefix}{msg}" if prefix else msg
        # Text keeps literal brackets (labels, ids) from being read as markup
        self._console.print(Text(output))
        self._write_file(output)

    def _write_file(self, line: str) -> None:
        if self._file_handle:
            self._file_handle.write(line + "\n")
            self._file_handle.flush()
            os.fsync(self._file_handle.fileno())

    def info(self, msg: str):
        """Info message"""
        self.log(msg, "[INFO] ")

    def warning(self, msg: str):
        """Warning message"""
        self.log(msg, "[WARNING] ")

    def error(self, msg: str):
        """Error message"""
        self.log(msg, "[ERROR] ")

    def debug(self, msg: str):
        """Debug message (only shown in debug mode)"""
        if self.debug_mode:
            timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]
            self.log(msg, f"[{timestamp}] [DEBUG] ")

    def api_retry(self, service: str, attempt: int, max_attempts: int, delay: int):
        """Log API retry"""
        self.log(f"{service} not responding. Retrying in {delay}s... (attempt {attempt}/{max_attempts})", "[WARNING] ")

    def api_failed(self, service: str, max_attempts: int):
        """Log API failure, once per service"""
        key = service.upper()
        if key in self._retry_note_services:
            return
        self._retry_note_services.add(key)
        self.log(f"{service} not responding after {max_attempts} attempts. Giving up.", "[ERROR] ")

    def api_request(self, method: str, url: str):
        """Log API request (debug mode only)"""
        if self.debug_mode:
            timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]
            self.log(f"API Request: {method} {url}", f"[{timestamp}] ")

    def api_response(self, status: int, data: object, elapsed_ms: float):
        """Log API response (debug mode only)"""
        if self.debug_mode:
            timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]
            self.log(f"API Response ({elapsed_ms:.0f}ms): Status {status}", f"[{timestamp}] ")
            if data:
                # Truncate large responses
                data_str = json.dumps(data, indent=2, default=str)
                if len(data_str) > 5000:
                    data_str = data_str[:5000] + "\n  ... (truncated)"
                self.log(f"  Data: {data_str}", f"[{timestamp}] ")

    def close(self):
        """Close file handle with goodbye message"""
        if self._file_handle:
            end_time = datetime.now()
            elapsed = end_time - self._start_time
            self._write_file(f"({end_time.strftime('%H:%M:%S')}  Ended session, elapsed {elapsed.total_seconds():.1f}s)")
            self._file_handle.close()
            self._file_handle = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


# Global instance (set by the CLI)
_logger: Optional[ShowreelLogger] = None

def set_logger(logger: ShowreelLogger):
    """Set global logger instance"""
    global _logger
    _logger = logger

def get_logger() -> ShowreelLogger:
    """Get global logger instance"""
    global _logger
    if _logger is None:
        # Fallback: stderr-only logger
        _logger = ShowreelLogger()
    return _logger

# Convenience functions
def info(msg: str):
    get_logger().info(msg)

def warning(msg: str):
    get_logger().warning(msg)

def error(msg: str):
    get_logger().error(msg)

def debug(msg: str):
    get_logger().debug(msg)
