import logging
import logging.handlers
import os
import sys
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Solver defaults: absolute arc-length tolerance and iteration bound
PRECISION = 0.01
MAX_ATTEMPTS = 50

# ---------------- Logging ----------------


def get_logger(name="pathtrim", log_file=None):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    fmt = logging.Formatter(
        '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
    )
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger


log = get_logger("pathtrim")

# ---------------- Config Models ----------------


class SolverCfg(BaseModel):
    precision: float = Field(PRECISION, gt=0)
    max_attempts: int = Field(MAX_ATTEMPTS, ge=1, le=10_000)
    tolerance: Literal["absolute", "relative"] = "absolute"


class ExportCfg(BaseModel):
    decimals: int = Field(3, ge=0, le=12)
    stroke: str = "black"
    stroke_width: float = Field(1.0, ge=0)


class LoggingCfg(BaseModel):
    level: str = "INFO"
    log_file: Optional[str] = None


class GlobalCfg(BaseModel):
    solver: SolverCfg = Field(default_factory=SolverCfg)
    export: ExportCfg = Field(default_factory=ExportCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "PATHTRIM_PRECISION": ("solver", "precision"),
    "PATHTRIM_MAX_ATTEMPTS": ("solver", "max_attempts"),
    "PATHTRIM_TOLERANCE": ("solver", "tolerance"),
    "PATHTRIM_LOG_LEVEL": ("logging", "level"),
}


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must be a mapping/object.")
    return data


def load_env() -> dict:
    load_dotenv(os.path.join(BASE, ".env"))
    env = {k: v for k, v in os.environ.items()}
    return env


def _default_config_path() -> Optional[str]:
    for name in ("pathtrim.yaml", "pathtrim.example.yaml"):
        p = os.path.join(BASE, "conf", name)
        if os.path.exists(p):
            return p
    return None


def load_config(path: Optional[str] = None, env: Optional[dict] = None) -> GlobalCfg:
    """
    Load the global configuration.

    Args:
        path: Explicit YAML path. Falls back to conf/pathtrim.yaml, then
            conf/pathtrim.example.yaml, then built-in defaults.
        env: Environment mapping used for PATHTRIM_* overrides. Defaults to
            the process environment after loading .env.

    Returns:
        Validated GlobalCfg

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If the merged configuration is invalid
    """
    if path is not None and not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file missing: {path}")
    path = path or _default_config_path()
    raw = load_yaml(path) if path else {}

    if env is None:
        env = load_env()
    for var, (section, key) in ENV_OVERRIDES.items():
        if env.get(var):
            raw[section] = dict(raw.get(section) or {})
            raw[section][key] = env[var]

    try:
        cfg = GlobalCfg(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


def configure_logging(cfg: LoggingCfg, names=("pathtrim",)) -> None:
    """Apply the configured level (and optional log file) to the named step loggers."""
    level = logging.getLevelName(cfg.level.upper())
    if not isinstance(level, int):
        log.warning(f"Unknown log level {cfg.level!r}, keeping INFO")
        level = logging.INFO
    for name in names:
        logger = get_logger(name)
        logger.setLevel(level)
        has_file = any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
        if cfg.log_file and not has_file:
            os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
            fh = logging.handlers.RotatingFileHandler(cfg.log_file, maxBytes=5_000_000, backupCount=5)
            fh.setFormatter(logger.handlers[0].formatter)
            logger.addHandler(fh)
