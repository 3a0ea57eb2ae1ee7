"""
Tests for the Set and FlagSet facades: mutators, membership, and how the
two differ once keys meet in a union.
"""

from mapset.sets import FlagSet, Set


# ── Set ─────────────────────────────────────────────────────────────


class TestSet:
    def test_add_reports_new_keys(self):
        s = Set()
        assert s.add("a")
        assert not s.add("a")
        assert s.contains("a")

    def test_delete_reports_presence(self):
        s = Set.of("a")
        assert s.delete("a")
        assert not s.delete("a")
        assert not s.contains("a")

    def test_extend_and_remove(self):
        s = Set()
        s.extend("a", "b", "c")
        s.remove("b", "missing")
        assert set(s.members()) == {"a", "c"}
        assert s.size() == 2

    def test_from_fromkeys(self):
        s = Set(dict.fromkeys(["x", "y"]))
        assert s.contains("x")
        assert s.equal(Set.of("y", "x"))

    def test_algebra_returns_sets(self):
        a = Set.of("a", "b", "c")
        b = Set.of("b", "c", "d")
        for result in (a.union(b), a.intersect(b), a.diff(b), a.sym_diff(b), a.clone()):
            assert isinstance(result, Set)
        assert set(a.union(b)) == {"a", "b", "c", "d"}
        assert set(a.intersect(b)) == {"b", "c"}
        assert set(a.diff(b)) == {"a"}
        assert set(a.sym_diff(b)) == {"a", "d"}

    def test_relations(self):
        small = Set.of("a")
        big = Set.of("a", "b")
        assert small.subset(big)
        assert small.proper_subset(big)
        assert not big.subset(small)
        assert not big.proper_subset(big)
        assert big.equal(big.clone())
        assert small.disjoint(Set.of("z"))
        assert not small.disjoint(big)

    def test_any_value_is_a_member(self):
        s = Set({"a": None, "b": 0, "c": False})
        assert s.size() == 3
        s.purge()
        assert len(s) == 3

    def test_union_keeps_first_value(self):
        a = Set({"k": "left"})
        b = Set({"k": "right"})
        assert a.union(b)["k"] == "left"


# ── FlagSet ─────────────────────────────────────────────────────────


class TestFlagSet:
    def test_add_reports_absent_or_false(self):
        f = FlagSet({"off": False})
        assert f.add("new")
        assert f.add("off")
        assert not f.add("off")
        assert f["off"] is True

    def test_delete_reports_flag(self):
        f = FlagSet({"on": True, "off": False})
        assert f.delete("on")
        assert not f.delete("off")
        assert not f.delete("missing")
        assert len(f) == 0

    def test_contains_is_stored_flag(self):
        f = FlagSet({"on": True, "off": False})
        assert f.contains("on")
        assert not f.contains("off")
        assert not f.contains("missing")

    def test_false_entries_are_not_members(self):
        f = FlagSet({"a": True, "b": False, "c": True})
        assert f.size() == 2
        assert set(f.members()) == {"a", "c"}
        assert f.clone() == {"a": True, "c": True}

    def test_purge_drops_false(self):
        f = FlagSet({"a": True, "b": False})
        f.purge()
        assert f == {"a": True}
        f.purge()
        assert f == {"a": True}

    def test_union_is_per_key_or(self):
        a = FlagSet({"x": True, "y": False})
        b = FlagSet({"y": True, "z": False})
        u = a.union(b)
        assert isinstance(u, FlagSet)
        assert u == {"x": True, "y": True}

    def test_intersect_and_differences(self):
        a = FlagSet({"x": True, "y": True, "w": False})
        b = FlagSet({"y": True, "z": True, "w": True})
        assert a.intersect(b) == {"y": True}
        assert a.diff(b) == {"x": True}
        assert a.sym_diff(b) == {"x": True, "z": True, "w": True}

    def test_relations_ignore_false(self):
        a = FlagSet({"x": True, "y": False})
        b = FlagSet({"x": True, "y": True})
        assert a.subset(b)
        assert a.proper_subset(b)
        assert not b.proper_subset(b)
        assert a.equal(FlagSet({"x": True}))
        assert a.disjoint(FlagSet({"y": True}))

    def test_proper_subset_is_strict(self):
        a = FlagSet.of("x", "y")
        assert a.subset(a.clone())
        assert not a.proper_subset(a.clone())
