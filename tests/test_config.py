"""Tests for the shared numeric policy."""

import tomllib
from pathlib import Path

import numpy as np

import vectorama
from vectorama import DEFAULT_COMPARE_EPSILON, DTYPE, EPSILON, SLERP_DOT_THRESHOLD


class TestNumericPolicy:
    def test_constants(self):
        assert DTYPE is np.float32
        assert EPSILON == float(np.finfo(np.float32).eps)
        assert SLERP_DOT_THRESHOLD == 0.9995
        assert DEFAULT_COMPARE_EPSILON == 1e-6

    def test_is_close_uses_default_tolerance(self):
        """Test is_close with no epsilon compares against DEFAULT_COMPARE_EPSILON."""
        base = vectorama.Vec3(1.0, 2.0, 3.0)
        assert base.is_close(vectorama.Vec3(1.0, 2.0, 3.0 + 5e-7))
        assert not base.is_close(vectorama.Vec3(1.0, 2.0, 3.0 + 1e-4))

    def test_storage_dtype(self):
        """Test every type stores single precision."""
        assert vectorama.Mat4.identity().as_flattened().dtype == np.float32
        assert vectorama.Vec3(0.1, 0.2, 0.3).as_flattened().dtype == np.float32

    def test_version(self):
        assert vectorama.__version__ == "0.1.0"

    def test_project_metadata(self):
        """Test pyproject declares the package without an internal notes readme."""
        pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
        project = tomllib.loads(pyproject.read_text())["project"]
        assert project["name"] == "vectorama"
        assert project["version"] == vectorama.__version__
        assert "readme" not in project
