from beamload.model import LoadConfig, OrderLine, build_layers, flatten_items_to_slots


def _slots(catalog, *lines):
    return flatten_items_to_slots([OrderLine(*line) for line in lines], catalog)


def test_width_limit_splits_layers(catalog, config):
    layers = build_layers(_slots(catalog, ("b10", 12, 3)), config)

    assert [len(layer.slots) for layer in layers] == [2, 1]
    assert [layer.total_width for layer in layers] == [20.0, 10.0]
    assert [layer.index for layer in layers] == [0, 1]


def test_gap_counts_between_slots_but_not_in_recorded_width(catalog):
    pool = _slots(catalog, ("b10", 12, 2))

    fits = build_layers(pool, LoadConfig(max_width=25.0, fixed_gap=5.0))
    too_wide = build_layers(pool, LoadConfig(max_width=25.0, fixed_gap=6.0))

    assert len(fits) == 1
    assert fits[0].total_width == 20.0
    assert len(too_wide) == 2


def test_height_spread_is_limited(catalog):
    pool = _slots(catalog, ("b10", 12, 1), ("tall", 12, 1), ("b12", 12, 1))

    layers = build_layers(pool, LoadConfig(max_width=100.0))

    assert [[s.beam_id for s in layer.slots] for layer in layers] == [
        ["b10", "b12"],
        ["tall"],
    ]
    assert layers[0].height_diff == 5.0
    assert layers[0].max_height == 25.0
    assert layers[0].min_height == 20.0


def test_custom_height_tolerance(catalog):
    pool = _slots(catalog, ("b10", 12, 1), ("tall", 12, 1))

    layers = build_layers(pool, LoadConfig(max_width=100.0, height_tolerance=20.0))

    assert len(layers) == 1


def test_oversized_slot_is_placed_alone(catalog, config):
    layers = build_layers(_slots(catalog, ("wide", 12, 1)), config)

    assert len(layers) == 1
    assert layers[0].total_width == 30.0


def test_oversized_slot_does_not_block_the_rest(catalog, config):
    pool = _slots(catalog, ("b10", 12, 1), ("wide", 12, 1), ("b12", 12, 1))

    layers = build_layers(pool, config)

    assert [[s.beam_id for s in layer.slots] for layer in layers] == [
        ["b10", "b12"],
        ["wide"],
    ]


def test_every_slot_is_used_once(catalog, config):
    pool = _slots(catalog, ("b10", 12, 4), ("b12", 6, 5), ("tall", 12, 2))

    layers = build_layers(pool, config)

    placed = [s for layer in layers for s in layer.slots]
    assert len(placed) == len(pool)
    for layer in layers:
        assert layer.total_width <= config.max_width


def test_gap_budget_holds_for_full_layers(catalog):
    config = LoadConfig(max_width=40.0, fixed_gap=2.0)
    pool = _slots(catalog, ("b10", 12, 5), ("b12", 12, 3))

    layers = build_layers(pool, config)

    assert sum(len(layer.slots) for layer in layers) == len(pool)
    assert any(len(layer.slots) > 2 for layer in layers)
    for layer in layers:
        n = len(layer.slots)
        if n > 1:
            used = sum(s.width for s in layer.slots) + config.fixed_gap * (n - 1)
            assert used <= config.max_width
            assert layer.total_width == sum(s.width for s in layer.slots)


def test_layer_priority_is_lowest_slot_priority(catalog):
    pool = _slots(catalog, ("b10", 12, 1, 3), ("b10", 12, 1, 1), ("b10", 12, 1, 2))

    layers = build_layers(pool, LoadConfig(max_width=100.0))

    assert len(layers) == 1
    assert layers[0].priority == 1


def test_empty_pool(config):
    assert build_layers([], config) == []
