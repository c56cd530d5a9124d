import pytest
from pypink.parser import parse_noise_component, parse_mix

def test_parse_noise_component():
    spec = parse_noise_component("pink/50")
    assert spec.kind == "pink"
    assert spec.amp == 50.0
    assert spec.generators == 15

    spec = parse_noise_component(" PINK:12/40 ")
    assert spec.kind == "pink"
    assert spec.generators == 12
    assert spec.amp == 40.0

    spec = parse_noise_component("white")
    assert spec.kind == "white"
    assert spec.amp == 100.0

    assert parse_noise_component("-") is None
    assert parse_noise_component("OFF") is None

@pytest.mark.parametrize("text", ["brown/50", "pink/loud", "pink:/50", "pink:x", "white:8/20", ""])
def test_parse_noise_component_errors(text):
    with pytest.raises(ValueError):
        parse_noise_component(text)

def test_parse_mix():
    specs = parse_mix("pink:8/60, white/10 off")

    assert len(specs) == 2
    assert specs[0].generators == 8
    assert specs[1].kind == "white"
    assert parse_mix("  ") == []
