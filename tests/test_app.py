"""
Tests for application wiring.
"""

import logging

from circlematch import app, config
from circlematch.app import CircleMatchApp, configure_logging


def test_configure_logging_is_idempotent(tmp_path, monkeypatch):
    log_path = tmp_path / "matchmaking.log"
    monkeypatch.setattr(config, "DATA_DIR", tmp_path)
    monkeypatch.setattr(app, "MATCHMAKING_LOG_PATH", log_path)
    root_logger = logging.getLogger()
    previous_level = root_logger.level

    try:
        configure_logging()
        configure_logging()

        handlers = [
            h for h in root_logger.handlers
            if isinstance(h, logging.FileHandler) and h.baseFilename == str(log_path.resolve())
        ]
        assert len(handlers) == 1

        logging.getLogger("circlematch.test").warning("Recompute rejected")
        handlers[0].flush()
        assert "Recompute rejected" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in list(root_logger.handlers):
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_path.resolve()):
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(previous_level)


def test_app_loads_data_files(tmp_path, reference, candidates, monkeypatch):
    profile_path = config.save_profile(reference, tmp_path / "profile.yaml")
    candidates_path = config.save_candidates(candidates, tmp_path / "candidates.yaml")
    monkeypatch.setattr(app, "load_profile", lambda: config.load_profile(profile_path))
    monkeypatch.setattr(app, "load_candidates", lambda: config.load_candidates(candidates_path))

    circle_app = CircleMatchApp(delay=0)

    assert circle_app.reference == reference
    assert circle_app.candidates == candidates
