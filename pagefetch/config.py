import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

loaded = load_dotenv(find_dotenv(usecwd=True))
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	return raw


def get_optional_float_env(name: str) -> Optional[float]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return None


def log_level() -> str:
	return (get_str_env("LOG_LEVEL", "INFO") or "INFO").strip().upper()


def default_config_path() -> Optional[str]:
	return get_optional_str_env("PAGEFETCH_CONFIG")
