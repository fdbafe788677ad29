# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - isolated_config (autouse): fresh config per test, snapshots
#   written under tmp_path
# - cyclic_graph: two records pointing at each other
# - schema: collection schema with foreign keys and an edge attribute
# ==============================================

import pytest

from graphnorm.config import reset_config
from graphnorm.normalization import RecordId


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("GRAPHNORM_SNAPSHOT_DIR", str(tmp_path / "snapshots"))
    reset_config()
    yield
    reset_config()


@pytest.fixture
def cyclic_graph():
    """A user whose pet points back at the user."""
    user = {"@rid": RecordId(12, 0), "name": "alice"}
    pet = {"@rid": RecordId(13, 4), "name": "rex", "owner": user}
    user["pets"] = [pet]
    return user


@pytest.fixture
def schema():
    return {
        "name": "string",
        "ownerId": {"type": "string", "foreignKey": True},
        "team": {"model": "team", "columnName": "teamRid"},
        "in_follows": {"collection": "user", "via": "out_follows"},
        "age": {"type": "integer"},
    }
