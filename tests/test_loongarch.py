from cpufeat.loongarch import LoongArchFeature, LoongArchInfo, feature_name


def test_feature_names_are_distinct_and_known():
    names = [feature_name(feature) for feature in LoongArchFeature]
    assert len(set(names)) == len(names)
    assert "unknown_feature" not in names
    assert all(names)


def test_feature_name_values():
    assert feature_name(LoongArchFeature.CPUCFG) == "CPUCFG"
    assert feature_name(LoongArchFeature.LBT_X86) == "LBT_X86"
    assert feature_name(LoongArchFeature.PTW) == "PTW"


def test_unknown_feature_name():
    assert feature_name("LSX") == "unknown_feature"


def test_has():
    info = LoongArchInfo(features=frozenset({LoongArchFeature.LSX, LoongArchFeature.LASX}))
    assert info.has(LoongArchFeature.LSX)
    assert info.has(LoongArchFeature.LASX)
    assert not info.has(LoongArchFeature.LVZ)


def test_default_info_is_empty():
    info = LoongArchInfo()
    assert [feature for feature in LoongArchFeature if info.has(feature)] == []