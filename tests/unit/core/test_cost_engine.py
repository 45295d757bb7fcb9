# tests/unit/core/test_cost_engine.py
# Unit tests for job setting cost totals (WEDM hours & SEDM surcharge)

import json

import pytest

from cutlog.core.cost_engine import (
    coerce_number,
    compute_totals,
    find_sedm_bracket,
    pass_multiplier,
    sedm_entry_amount,
    summarize_job,
    thickness_divisor,
)
from cutlog.core.types import JobSetting, SedmEntry, SedmSpec


def _sedm_setting(size, thickness, holes=1, quantity=1):
    return JobSetting(
        cut_length_mm=0,
        thickness_mm=thickness,
        setting_level=0,
        quantity=quantity,
        rate=0,
        sedm=SedmSpec(enabled=True, entries=[SedmEntry(thickness, size, holes)]),
    )


class TestLookups:

    @pytest.mark.parametrize(
        "thickness, divisor",
        [
            (0, 1017.44),
            (19.99, 1017.44),
            (20, 1465),
            (100, 1465),
            (100.5, 1183),
            (150, 1183),
            (150.1, 1000),
            (400, 1000),
        ],
    )
    def test_thickness_divisor_boundaries(self, thickness, divisor):
        assert thickness_divisor(thickness) == divisor

    @pytest.mark.parametrize(
        "level, multiplier",
        [
            ("1", 1.0), (2, 1.5), ("3", 1.75), (4.0, 2.0), ("5", 2.5), (6, 2.75), ("9", 1.0), ("", 1.0), (None, 1.0),
            (10**400, 1.0), ("1" * 500, 1.0), ("\u0662", 1.0),
        ],
    )
    def test_pass_multiplier(self, level, multiplier):
        assert pass_multiplier(level) == multiplier

    @pytest.mark.parametrize(
        "size, key",
        [(0.3, "0.3-0.4"), (0.4, "0.3-0.4"), (0.5, "0.5-0.6"), (0.7, "0.7"), (1.0, "0.8-1.2"), (3.0, "3.0")],
    )
    def test_bracket_lookup(self, size, key):
        assert find_sedm_bracket(size).key == key

    # * Sizes between brackets price nothing
    @pytest.mark.parametrize("size", [0.2, 0.45, 1.3, 2.1, 3.5])
    def test_bracket_gap(self, size):
        assert find_sedm_bracket(size) is None


class TestCoerceNumber:

    @pytest.mark.parametrize(
        "value, expected",
        [(None, 0.0), ("", 0.0), ("  ", 0.0), ("12.5", 12.5), (7, 7.0), (True, 1.0), (float("nan"), 0.0)],
    )
    def test_values(self, value, expected):
        assert coerce_number(value) == expected

    # * Non-empty garbage is recorded, blanks are not
    def test_records_garbage(self):
        coerced = []
        assert coerce_number("12mm", "cutLengthMm", coerced) == 0.0
        assert coerce_number("", "rate", coerced) == 0.0
        assert coerced == ["cutLengthMm"]

    # * Integers past float range coerce to 0 & are recorded
    def test_int_out_of_float_range(self):
        coerced = []
        assert coerce_number(10**400, "cutLengthMm", coerced) == 0.0
        assert coerce_number(-(10**400), "rate", coerced) == 0.0
        assert coerced == ["cutLengthMm", "rate"]

    def test_large_int_in_range(self):
        assert coerce_number(10**300) == float(10**300)


class TestComputeTotals:

    # * Worked example: thickness 5 uses divisor 1017.44
    def test_worked_example(self):
        setting = JobSetting(
            cut_length_mm=10,
            thickness_mm=5,
            pass_level="1",
            setting_level=1,
            quantity=2,
            rate=100,
        )
        totals = compute_totals(setting)
        assert totals.total_hours_per_piece == pytest.approx(10 * 5 / 1017.44 + 0.5)
        assert totals.total_hours_per_piece == pytest.approx(0.54914, abs=1e-5)
        assert totals.wedm_amount == pytest.approx(109.83, abs=0.01)
        assert totals.sedm_amount == 0.0
        assert totals.total_amount == pytest.approx(totals.wedm_amount)
        assert totals.total_hours == pytest.approx(2 * 0.54914, abs=1e-4)

    # * Same input, same output
    def test_deterministic(self):
        setting = JobSetting(cut_length_mm=120, thickness_mm=45, pass_level=3, setting_level=2, quantity=4, rate=550)
        assert compute_totals(setting) == compute_totals(setting)

    # * Critical & PIP finish each add one hour per piece
    def test_surcharges(self):
        base = JobSetting(cut_length_mm=10, thickness_mm=5, quantity=1, rate=10)
        both = JobSetting(
            cut_length_mm=10, thickness_mm=5, quantity=1, rate=10, is_critical=True, has_pip_finish=True
        )
        assert compute_totals(both).total_hours_per_piece - compute_totals(base).total_hours_per_piece == pytest.approx(2.0)

    # * Pass multiplier scales cut hours only
    def test_pass_multiplier_scales_cut_hours(self):
        one = compute_totals(JobSetting(cut_length_mm=100, thickness_mm=50, pass_level=1, setting_level=2))
        two = compute_totals(JobSetting(cut_length_mm=100, thickness_mm=50, pass_level=2, setting_level=2))
        cut_hours = 100 * 50 / 1465
        assert one.total_hours_per_piece == pytest.approx(cut_hours + 1.0)
        assert two.total_hours_per_piece == pytest.approx(cut_hours * 1.5 + 1.0)

    # * Garbage numbers become 0 & are reported, never raise
    def test_coercion_reported(self):
        setting = JobSetting(cut_length_mm="ten", thickness_mm=5, quantity=2, rate="abc")
        totals = compute_totals(setting)
        assert totals.wedm_amount == 0.0
        assert set(totals.coerced_fields) == {"cutLengthMm", "rate"}

    # * Long integer literals from a job document never raise
    def test_long_integer_literals(self):
        data = json.loads('{"cut": 1' + "0" * 400 + ', "thickness": 5, "qty": 2, "rate": 100, "passLevel": 1' + "0" * 400 + "}")
        totals = compute_totals(JobSetting.from_dict(data))
        assert totals.coerced_fields == ["cutLengthMm"]
        assert totals.wedm_amount == 0.0
        assert totals.total_amount == 0.0

    # * Disabled SEDM ignores its entries
    def test_sedm_disabled(self):
        setting = _sedm_setting(0.4, 20, holes=3)
        setting.sedm.enabled = False
        assert compute_totals(setting).sedm_amount == 0.0


class TestSedm:

    @pytest.mark.parametrize(
        "size, thickness, per_hole",
        [
            (0.4, 20, 300.0),
            (0.4, 25, 375.0),
            (0.5, 20, 250.0),
            (0.5, 25, 310.0),
            (0.4, 10, 300.0),
        ],
    )
    # * Below 20mm prices as 20mm; above adds per-mm
    def test_per_hole(self, size, thickness, per_hole):
        totals = compute_totals(_sedm_setting(size, thickness))
        assert totals.sedm_amount == pytest.approx(per_hole)

    # * Amount scales w/ holes & quantity
    def test_scales_with_holes_and_quantity(self):
        totals = compute_totals(_sedm_setting(0.4, 25, holes=2, quantity=3))
        assert totals.sedm_amount == pytest.approx(375.0 * 2 * 3)
        assert totals.total_amount == pytest.approx(totals.wedm_amount + totals.sedm_amount)

    # * Multiple entries are summed
    def test_entries_sum(self):
        setting = JobSetting(
            quantity=1,
            sedm=SedmSpec(
                enabled=True,
                entries=[SedmEntry(20, 0.4, 1), SedmEntry(25, 0.5, 2), SedmEntry(20, 0.45, 5)],
            ),
        )
        assert compute_totals(setting).sedm_amount == pytest.approx(300 + 2 * 310)

    def test_entry_amount_gap(self):
        assert sedm_entry_amount(SedmEntry(20, 1.4, 1), 5) == 0.0


class TestSummarizeJob:

    def test_sums_lines(self):
        settings = [
            JobSetting(cut_length_mm=10, thickness_mm=5, setting_level=1, quantity=2, rate=100),
            _sedm_setting(0.4, 20, holes=1, quantity=2),
        ]
        job = summarize_job(settings)
        assert len(job.lines) == 2
        assert job.total_amount == pytest.approx(job.lines[0].total_amount + 600.0)
        data = job.to_dict()
        assert data["sedmAmount"] == 600.0
        assert len(data["settings"]) == 2
