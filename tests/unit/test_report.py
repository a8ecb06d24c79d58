"""Tests for text rendering of solve results."""

from gridlogic.core.model import build_model
from gridlogic.core.report import format_report, order_fields
from gridlogic.core.solver import SolveResult, SolveStatus, solve


class TestOrderFields:
    def test_schema_order_without_configuration(self) -> None:
        assert order_fields("P", ["a", "b"], {}) == ["a", "b"]

    def test_configured_order_selects_and_orders(self) -> None:
        orders = {"P": ["c", "a", "missing"]}
        assert order_fields("P", ["a", "b", "c"], orders) == ["c", "a"]

    def test_other_arrays_unaffected(self) -> None:
        assert order_fields("Q", ["a", "b"], {"P": ["b"]}) == ["a", "b"]


class TestFormatReport:
    def test_solved_pair(self, pair_puzzle) -> None:
        text = format_report(solve(build_model(pair_puzzle)))
        assert text == (
            "SUCCESS:\n"
            "P[0].a = blue\n"
            "P[0].b = red\n"
            "\n"
            "P[1].a = red\n"
            "P[1].b = red\n"
            "\n"
        )

    def test_field_order_applied(self, guests_puzzle) -> None:
        result = solve(build_model(guests_puzzle))
        text = format_report(result, {"Guests": ["name", "snack"]})
        assert "Guests[0].name = alice\nGuests[0].snack = fruit\n\n" in text
        assert ".color" not in text

    def test_scalars_follow_records(self) -> None:
        result = SolveResult(
            puzzle="mixed",
            status=SolveStatus.SOLVED,
            iterations=1,
            search_space=4,
            records={"R": [{"x": "a"}]},
            scalars={"D": ["mon", "tue"]},
        )
        assert format_report(result) == "SUCCESS:\nR[0].x = a\n\nD[0] = mon\nD[1] = tue\n"

    def test_record_arrays_sorted_by_name(self) -> None:
        result = SolveResult(
            puzzle="two",
            status=SolveStatus.SOLVED,
            iterations=1,
            search_space=1,
            records={"Zeta": [{"f": "a"}], "Alpha": [{"f": "b"}]},
        )
        text = format_report(result)
        assert text.index("Alpha[0]") < text.index("Zeta[0]")

    def test_no_solution(self) -> None:
        result = SolveResult(
            puzzle="x", status=SolveStatus.NO_SOLUTION, iterations=9, search_space=9
        )
        assert format_report(result) == "NO SOLUTION FOUND.\n"

    def test_aborted(self) -> None:
        result = SolveResult(puzzle="x", status=SolveStatus.ABORTED, iterations=5, search_space=27)
        assert format_report(result) == "SEARCH ABORTED after 5 of 27 assignments.\n"
