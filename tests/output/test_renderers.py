"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from typing import Any

from baconctl.output.renderers import render_result
from baconctl.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: Any) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=data)


class TestCenterRenderer:
    def test_headline(self) -> None:
        output = render_result(
            _ok(
                "center",
                center="Kevin Bacon",
                reachable=5,
                population=10,
                average_separation=1.2,
            )
        )
        assert output == (
            "Kevin Bacon is now the center of the acting universe, connected to "
            "5/10 actors with average separation 1.2"
        )

    def test_isolated_center(self) -> None:
        output = render_result(
            _ok("recenter", center="Lonely", reachable=0, population=3, average_separation=None)
        )
        assert "0/3 actors" in output
        assert "undefined (no connections)" in output


class TestPathRenderer:
    def test_chain(self) -> None:
        output = render_result(
            _ok(
                "path",
                name="Helen Hunt",
                separation=2,
                steps=[
                    {"name": "Helen Hunt", "movies": ["Twister"], "co_star": "Bill Paxton"},
                    {"name": "Bill Paxton", "movies": ["Apollo 13"], "co_star": "Kevin Bacon"},
                ],
            )
        )
        lines = output.splitlines()
        assert lines[0] == "Helen Hunt's number is 2"
        assert lines[1] == "Helen Hunt appeared in [Twister] with Bill Paxton"
        assert lines[2] == "Bill Paxton appeared in [Apollo 13] with Kevin Bacon"

    def test_infinity(self) -> None:
        output = render_result(_ok("path", name="Ann Island", separation=None, steps=[]))
        assert output == "The Bacon Number for Ann Island is infinity (no connection found)."

    def test_markup_in_names_is_literal(self) -> None:
        output = render_result(_ok("path", name="[bold]Odd[/bold]", separation=0, steps=[]))
        assert "[bold]Odd[/bold]'s number is 0" in output


class TestListRenderers:
    def test_rank_best(self) -> None:
        output = render_result(
            _ok(
                "rank",
                direction="best",
                items=[{"rank": 1, "name": "Bill Paxton", "average_separation": 1.2}],
            )
        )
        assert "top 1 actors with the best Bacon numbers" in output
        assert "Bill Paxton" in output
        assert "1.2" in output

    def test_rank_worst(self) -> None:
        output = render_result(_ok("rank", direction="worst", items=[]))
        assert "bottom 0 actors with the worst Bacon numbers" in output

    def test_degree(self) -> None:
        output = render_result(
            _ok("degree", low=0, high=0, count=1, items=[{"name": "Lonely Star", "degree": 0}])
        )
        assert "Actors with 0-0 direct connections:" in output
        assert "Lonely Star" in output
        assert output.endswith("1 actors")

    def test_separation(self) -> None:
        output = render_result(
            _ok(
                "separation",
                center="Kevin Bacon",
                low=2,
                high=5,
                count=1,
                items=[{"name": "Helen Hunt", "separation": 2}],
            )
        )
        assert "Actors 2-5 steps from Kevin Bacon:" in output
        assert "Helen Hunt" in output

    def test_unreachable(self) -> None:
        output = render_result(
            _ok(
                "unreachable",
                center="Kevin Bacon",
                count=2,
                items=[{"name": "Ann Island"}, {"name": "Bob Island"}],
            )
        )
        lines = output.splitlines()
        assert lines[0].endswith("infinite separation from Kevin Bacon:")
        assert "  Ann Island" in lines
        assert "  Bob Island" in lines
        assert lines[-1] == "2 actors"


class TestErrorAndGeneric:
    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="path",
            error=ServiceError(code="NOT_FOUND", message="Actor 'X' not found in the universe"),
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "path" in output
        assert "Actor 'X' not found" in output

    def test_error_detail_when_verbose(self) -> None:
        result = ServiceResult.failure("degree", "INVALID_RANGE", "bad", low=3, high=1)
        output = render_result(result, verbose=True)
        assert "detail:" in output
        assert "low: 3" in output

    def test_generic_fallback(self) -> None:
        output = render_result(_ok("load", files=["a", "b"], count=2))
        assert output.startswith("OK")
        assert '"a","b"' in output
        assert "count:" in output


class TestVerboseMeta:
    def test_telemetry_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="recenter",
            data={"center": "A", "reachable": 1, "population": 2, "average_separation": 1.0},
            meta={
                "telemetry": {
                    "name": "UniverseService.recenter",
                    "duration_ms": 1.5,
                    "children": [
                        {
                            "name": "shortest_path_tree",
                            "duration_ms": 1.0,
                            "annotations": {"tree_size": 2},
                        }
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "UniverseService.recenter" in output
        assert "shortest_path_tree  (tree_size=2)" in output

    def test_meta_hidden_without_verbose(self) -> None:
        result = ServiceResult(ok=True, op="load", meta={"telemetry": {"name": "x"}})
        assert "meta:" not in render_result(result)


class TestLongLines:
    def test_long_co_star_line_not_wrapped(self) -> None:
        movies = [f"Shared Feature Number {i}" for i in range(29)]
        output = render_result(
            _ok(
                "path",
                name="Tom Hanks",
                separation=1,
                steps=[{"name": "Tom Hanks", "movies": movies, "co_star": "Kevin Bacon"}],
            )
        )
        lines = output.splitlines()
        assert len(lines) == 2
        assert lines[1] == (
            "Tom Hanks appeared in [" + ", ".join(movies) + "] with Kevin Bacon"
        )

    def test_long_headline_not_wrapped(self) -> None:
        output = render_result(
            _ok(
                "center",
                center="An Actor With A Remarkably Long Stage Name Indeed",
                reachable=0,
                population=12345,
                average_separation=None,
            )
        )
        assert "\n" not in output
        assert output.endswith("average separation undefined (no connections)")


class TestMarkupInData:
    def test_bracketed_detail_when_verbose(self) -> None:
        result = ServiceResult.failure(
            "path", "NOT_FOUND", "Actor 'Foo [/bar]' not found in the universe", name="Foo [/bar]"
        )
        output = render_result(result, verbose=True)
        assert "Actor 'Foo [/bar]' not found" in output
        assert "name: Foo [/bar]" in output

    def test_bracketed_meta_values(self) -> None:
        result = ServiceResult(
            ok=True,
            op="load",
            meta={
                "source": "[/odd]",
                "telemetry": {
                    "name": "load[/x]",
                    "duration_ms": 0.5,
                    "annotations": {"name": "[bold]"},
                },
            },
        )
        output = render_result(result, verbose=True)
        assert "source: [/odd]" in output
        assert "load[/x]  (name=[bold])" in output
