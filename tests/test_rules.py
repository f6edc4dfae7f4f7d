from adprt.empty import empty_of, is_empty
from adprt.rules import (
    RuleNamer,
    Rules,
    group_by_shape,
    match_string,
    merge,
    rule_name_debug,
)
from adprt.sequence import parse_chars


def _rules(shape, *productions):
    r = Rules(shape=shape)
    for nt, rhs in productions:
        r.insert_production(nt, rhs)
    return r


def test_to_text_layout():
    r = Rules(signature_name="sig", axiom_name="start")
    r.insert_production("start", "b")
    r.insert_production("start", "a")
    assert r.to_text() == (
        "grammar grmmr uses sig (axiom = start) {\n"
        "  start = a | b # h;\n"
        "}"
    )
    assert str(r) == r.to_text()


def test_empty_rules_prints_e():
    e = empty_of(Rules)
    assert str(e) == "E"
    assert is_empty(e) is True
    assert is_empty(Rules()) is False


def test_append_shape_fuses_unpaired_stretch():
    r = Rules(shape="[]_")
    r.append_shape("_[]")
    assert r.shape == "[]_[]"


def test_append_shape_plain_and_edge_cases():
    r = Rules()
    r.append_shape("[]")
    assert r.shape == "[]"
    r.append_shape("")
    assert r.shape == "[]"
    r.append_shape("_")
    assert r.shape == "[]_"


def test_add_unions_productions_and_concatenates_shape():
    a = _rules("[]", ("s", "x"))
    b = _rules("_", ("s", "y"), ("t", "z"))
    c = a + b
    assert c.shape == "[]_"
    assert c.productions == {"s": {"x", "y"}, "t": {"z"}}
    assert a.productions == {"s": {"x"}}


def test_merge_keeps_last_shape():
    merged = merge([_rules("[]", ("s", "x")), _rules("[][]", ("t", "y"))])
    assert merged.shape == "[][]"
    assert merged.productions == {"s": {"x"}, "t": {"y"}}


def test_merge_of_nothing_is_blank():
    assert merge([]) == Rules()


def test_group_by_shape():
    groups = group_by_shape(
        [
            _rules("[]", ("s", "x")),
            _rules("_", ("s", "y")),
            _rules("[]", ("t", "z")),
        ]
    )
    assert len(groups) == 2
    assert groups[0].productions == {"s": {"x"}, "t": {"z"}}
    assert groups[1].productions == {"s": {"y"}}


def test_rule_namer_is_stable():
    namer = RuleNamer()
    first = namer.name("struct", "[]")
    assert first == "auto_gen_rule_0"
    assert namer.name("struct", "[]") == first
    assert namer.name("struct", "_") == "auto_gen_rule_1"


def test_rule_name_debug():
    assert rule_name_debug("struct", "[]") == "struct_[]"


def test_match_string():
    seq = parse_chars("hello")
    assert match_string(seq, 1, 3, "el") is True
    assert match_string(seq, 1, 3, "ex") is False
    assert match_string(seq, 1, 4, "el") is False