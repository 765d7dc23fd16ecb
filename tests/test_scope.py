import pytest

from egg.errors import EggReadOnlyError, EggUnboundSymbol
from egg.types import Scope


@pytest.fixture
def chain():
    root = Scope()
    root.define("x", 1)
    root.define("y", 2)
    middle = Scope(outer=root)
    middle.define("y", 20)
    inner = Scope(outer=middle)
    return root, middle, inner


def test_lookup_walks_outward(chain):
    root, middle, inner = chain
    assert inner.lookup("x") == 1
    assert inner.lookup("y") == 20
    assert root.lookup("y") == 2


def test_lookup_unbound(chain):
    _, _, inner = chain
    with pytest.raises(EggUnboundSymbol, match="Undefined binding: z"):
        inner.lookup("z")


def test_define_only_touches_own_frame(chain):
    root, middle, inner = chain
    inner.define("x", 100)
    assert inner.lookup("x") == 100
    assert root.lookup("x") == 1
    assert "x" in inner.vars and "x" not in middle.vars


def test_set_mutates_nearest_owner(chain):
    root, middle, inner = chain
    inner.set("y", 99)
    assert middle.vars["y"] == 99
    assert root.vars["y"] == 2
    assert "y" not in inner.vars

    inner.set("x", 5)
    assert root.vars["x"] == 5


def test_set_unbound_fails(chain):
    _, _, inner = chain
    with pytest.raises(EggUnboundSymbol, match="Binding not found: nope"):
        inner.set("nope", 1)
    assert "nope" not in inner


def test_find(chain):
    root, middle, inner = chain
    assert inner.find("y") is middle
    assert inner.find("x") is root
    assert inner.find("missing") is None


def test_frozen_scope_rejects_writes():
    root = Scope()
    root.update({"a": 1, "b": 2})
    root.freeze()
    child = Scope(outer=root)

    with pytest.raises(EggReadOnlyError):
        root.define("c", 3)
    with pytest.raises(EggReadOnlyError):
        child.set("a", 10)
    assert root.lookup("a") == 1

    # shadowing the frozen binding in a child is fine
    child.define("a", 10)
    assert child.lookup("a") == 10
    assert root.lookup("a") == 1


def test_str_and_repr(chain):
    root, _, inner = chain
    assert str(root) == "{x: 1, y: 2}"
    assert str(inner) == "{} -> ..."
    assert repr(inner) == "<Scope chain: {} -> {y: 20} -> {x: 1, y: 2}>"
