"""Tests for runtime settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from smilescope import morgan_fingerprint
from smilescope.config import Settings, settings


class TestSettings:
    """Test defaults and environment overrides."""
    
    def test_defaults(self, monkeypatch):
        """Default values without environment overrides."""
        for name in ("FINGERPRINT_RADIUS", "FINGERPRINT_BITS", "KNN_K",
                     "WEIGHT_PRECISION", "STRICT_ELEMENTS"):
            monkeypatch.delenv(f"SMILESCOPE_{name}", raising=False)
        s = Settings()
        assert s.fingerprint_radius == 2
        assert s.fingerprint_bits == 128
        assert s.knn_k == 5
        assert s.weight_precision == 3
        assert s.strict_elements is False
    
    def test_env_override(self, monkeypatch):
        """SMILESCOPE_* variables override defaults."""
        monkeypatch.setenv("SMILESCOPE_FINGERPRINT_BITS", "2048")
        monkeypatch.setenv("SMILESCOPE_STRICT_ELEMENTS", "true")
        s = Settings()
        assert s.fingerprint_bits == 2048
        assert s.strict_elements is True
    
    def test_invalid_value(self, monkeypatch):
        """Out-of-range values are rejected."""
        monkeypatch.setenv("SMILESCOPE_FINGERPRINT_BITS", "0")
        with pytest.raises(ValidationError):
            Settings()
    
    def test_frozen(self):
        """The settings object is immutable."""
        with pytest.raises(ValidationError):
            settings.knn_k = 10
    
    def test_arguments_win(self):
        """Explicit arguments take precedence over settings."""
        assert len(morgan_fingerprint("CCO", n_bits=32)) == 32
