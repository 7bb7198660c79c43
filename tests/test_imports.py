def test_import_static_decay_package() -> None:
    import importlib

    module = importlib.import_module("static_decay")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from static_decay.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_cli_app_does_not_load_tables() -> None:
    from static_decay.presentation.cli import app

    assert callable(app.main)
