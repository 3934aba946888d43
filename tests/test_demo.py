import re

import pytest

from tsrand.demo import main, shuffle_parts


def _run(capsys):
    code = main([])
    out = capsys.readouterr().out
    return code, out


def test_shuffle_parts_is_permutation():
    parts = ["AB", "cd", "12", "!@"]
    for _ in range(200):
        result = shuffle_parts(parts)
        assert sorted(result) == sorted(parts)


def test_shuffle_parts_leaves_input_alone():
    parts = ["w", "x", "y", "z"]
    shuffle_parts(parts)
    assert parts == ["w", "x", "y", "z"]


def test_shuffle_parts_empty_and_single():
    assert shuffle_parts([]) == []
    assert shuffle_parts(["only"]) == ["only"]


def test_shuffle_parts_reaches_other_orders():
    parts = ["a", "b", "c", "d"]
    seen = {tuple(shuffle_parts(parts)) for _ in range(300)}
    assert len(seen) > 1


def test_main_returns_zero(capsys):
    code, out = _run(capsys)
    assert code == 0
    assert len(out.splitlines()) > 50


def test_main_reports_invalid_range_error(capsys):
    _, out = _run(capsys)
    assert "invalid range: min must be less than max" in out


def test_main_dice_are_consistent(capsys):
    _, out = _run(capsys)
    dice = re.findall(r"Dice (\d+): (\d+) \+ (\d+) = (\d+)", out)
    assert len(dice) == 5
    for _, first, second, total in dice:
        a, b, c = int(first), int(second), int(total)
        assert 1 <= a <= 6
        assert 1 <= b <= 6
        assert a + b == c


def test_main_business_formats(capsys):
    code, out = _run(capsys)
    assert code == 0
    assert len(re.findall(r"ORD[0-9]{8}[A-Z]{4}\b", out)) == 1
    assert len(re.findall(r"TXN_[0-9]{10}_[0-9a-zA-Z]{8}\b", out)) == 1
    assert len(re.findall(r"SAVE[A-Z]{6}\b", out)) == 1
    assert len(re.findall(r"BATCH_[0-9]{6}_[A-Z]{3}\b", out)) == 1


def test_main_uuids_are_canonical(capsys):
    _, out = _run(capsys)
    uuids = re.findall(
        r"uuid_string:\s+([0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})$",
        out,
        flags=re.MULTILINE,
    )
    assert len(uuids) == 2
    assert len(set(uuids)) == 2


def test_main_equipment_in_range(capsys):
    _, out = _run(capsys)
    rows = re.findall(r"attack: (\d+), durability: (\d+)%", out)
    assert len(rows) == 3
    for attack, durability in rows:
        assert 50 <= int(attack) < 150
        assert 80 <= int(durability) < 100


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--no-such-option"])
    assert exc.value.code == 2