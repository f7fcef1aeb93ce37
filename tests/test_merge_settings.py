from arbgen.config.schema import merge_settings


def test_user_layer_overrides_single_setting() -> None:
    defaults = {"seed": {"seed_env": "ARBGEN_SEED", "value": None}, "sampling": {"size": 100, "count": 10}}
    merged = merge_settings(defaults, {"sampling": {"count": 3}})
    assert merged["sampling"] == {"size": 100, "count": 3}
    assert merged["seed"] == {"seed_env": "ARBGEN_SEED", "value": None}


def test_layers_are_not_mutated() -> None:
    defaults = {"seed": {"value": None}, "kinds": ["nat", "int"]}
    user = {"seed": {"value": 7}, "kinds": ["ascii"]}
    merged = merge_settings(defaults, user)
    assert merged == {"seed": {"value": 7}, "kinds": ["ascii"]}
    assert defaults == {"seed": {"value": None}, "kinds": ["nat", "int"]}
    assert user == {"seed": {"value": 7}, "kinds": ["ascii"]}


def test_scalar_replaces_section() -> None:
    merged = merge_settings({"seed": {"value": 1}}, {"seed": None})
    assert merged == {"seed": None}
