import csv
import json

from hatchery.app.headless import run_headless


def _read_csv(path):
    with path.open(newline="") as handle:
        return list(csv.reader(handle))


def test_headless_log_header_and_rows(tmp_path):
    log_path = tmp_path / "run.csv"
    run_headless(generations=3, seed=1, log_path=log_path, deterministic_log=True)
    rows = _read_csv(log_path)
    assert len(rows) == 4
    assert rows[0] == [
        "generation",
        "created",
        "active",
        "dead",
        "births",
        "deaths",
        "new_pairs",
        "active_pairs",
        "unpaired",
        "lineage_rejections",
        "trait_A",
        "trait_B",
        "trait_C",
        "trait_none",
        "tick_ms",
    ]
    idx = {name: i for i, name in enumerate(rows[0])}
    for generation, row in enumerate(rows[1:], start=1):
        assert int(row[idx["generation"]]) == generation
        created = int(row[idx["created"]])
        active = int(row[idx["active"]])
        dead = int(row[idx["dead"]])
        assert active == created - dead
        traits = sum(int(row[idx[f"trait_{name}"]]) for name in ("A", "B", "C", "none"))
        assert traits == active
        assert float(row[idx["tick_ms"]]) == 0.0


def test_headless_is_deterministic(tmp_path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    run_headless(generations=5, seed=9, log_path=first, deterministic_log=True)
    run_headless(generations=5, seed=9, log_path=second, deterministic_log=True)
    assert first.read_text() == second.read_text()


def test_headless_config_and_summary(tmp_path):
    config_path = tmp_path / "sim.yaml"
    config_path.write_text("starting_organisms: 4\nhealth:\n  fixed_amount: 1\n")
    summary_path = tmp_path / "summary.json"

    simulation = run_headless(
        generations=2,
        seed=3,
        log_path=None,
        config_path=config_path,
        summary_path=summary_path,
    )

    payload = json.loads(summary_path.read_text())
    assert payload["generations"] == 2
    assert payload["seed"] == 3
    assert payload["final"]["active"] == 0
    assert payload["final"]["dead"] == 4
    assert payload["extinct_at"] == 1
    assert payload["total_pairs"] == 0
    assert simulation.generation == 2
