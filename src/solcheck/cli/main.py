"""CLI entry point for solcheck."""
from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional, Sequence, Tuple

import click

from solcheck import __version__
from solcheck.config import REPORT_FORMATS, CheckSettings
from solcheck.core import (
    Checker,
    CheckSession,
    DescribedTestCase,
    ExactStrategy,
    GatedStrategy,
    SolcheckError,
    Task,
    TestCase,
    UserSolution,
    find_by_expected,
    parse_strategy,
    sort_by_input,
)
from solcheck.core.results import Submission
from solcheck.reporting import Reporter, ReportManager, StructuredReporter, TerminalReporter


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds settings shared by subcommands."""

    def __init__(self, settings: CheckSettings) -> None:
        self.settings = settings
        self.session = CheckSession()


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"solcheck {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the solcheck version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Check solutions against task test suites."""

    try:
        settings = CheckSettings.from_env()
    except SolcheckError as exc:
        raise click.ClickException(str(exc)) from exc
    level = "DEBUG" if verbose else settings.log_level
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = CliState(settings=settings)


def _check_options(func: Callable) -> Callable:
    func = click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")(func)
    func = click.option("--timeout", "timeout_s", type=float, help="Seconds to wait for each test case.")(func)
    func = click.option("--workers", type=click.IntRange(min=1), help="Run test cases on this many threads.")(func)
    func = click.option(
        "--report",
        "report_format",
        type=click.Choice(list(REPORT_FORMATS)),
        help="Report format (terminal by default).",
    )(func)
    return func


@cli.command()
@click.option("--solution", default="demo-solution", show_default=True, help="Opaque solution payload.")
@_check_options
@click.pass_obj
def demo(
    state: CliState,
    solution: str,
    report_format: Optional[str],
    workers: Optional[int],
    timeout_s: Optional[float],
    no_color: bool,
) -> None:
    """Run the built-in sample task."""

    plain = [
        TestCase("input1", "expected1", ExactStrategy()),
        TestCase("input2", "input2", GatedStrategy(3)),
    ]
    described = [
        DescribedTestCase.create("input3", "expected3", "Test A", ExactStrategy()),
        DescribedTestCase.create("input4", "expected4", "Test C", GatedStrategy(5)),
        DescribedTestCase.create("input5", "expected5", "Test B", ExactStrategy()),
    ]
    click.echo("Sorted test cases by input:")
    for case in sort_by_input(plain):
        click.echo(f"  {case.display_input()}")
    click.echo("Described test cases:")
    for case in sort_by_input(described):
        click.echo(f"  {case.display_input()}")

    search = "expected3"
    found = find_by_expected(plain, search)
    if found is not None:
        click.echo(f"Found test with expected: {found.expected}")
    else:
        click.echo(f"Test with expected '{search}' not found.")

    task = Task(description="demo", suite=state.session.new_suite(plain))
    submission = _run_check(state, task, UserSolution(solution), report_format, workers, timeout_s, no_color)
    raise click.exceptions.Exit(_exit_code(submission))


@cli.command()
@click.option("--solution", required=True, help="Opaque solution payload.")
@click.option(
    "--case",
    "case_specs",
    type=(str, str, str),
    multiple=True,
    required=True,
    metavar="INPUT EXPECTED STRATEGY",
    help="Test case; STRATEGY is 'exact' or 'gated:N'. Repeatable.",
)
@click.option("--description", default="ad-hoc", show_default=True, help="Task description.")
@click.option("--augmented", is_flag=True, help="Report one bonus test beyond those given.")
@_check_options
@click.pass_obj
def check(
    state: CliState,
    solution: str,
    case_specs: Sequence[Tuple[str, str, str]],
    description: str,
    augmented: bool,
    report_format: Optional[str],
    workers: Optional[int],
    timeout_s: Optional[float],
    no_color: bool,
) -> None:
    """Check SOLUTION against the given test cases."""

    cases = _parse_cases(case_specs)
    task = Task(description=description, suite=state.session.new_suite(cases, augmented=augmented))
    submission = _run_check(state, task, UserSolution(solution), report_format, workers, timeout_s, no_color)
    raise click.exceptions.Exit(_exit_code(submission))


def _parse_cases(specs: Sequence[Tuple[str, str, str]]) -> List[TestCase]:
    cases: List[TestCase] = []
    for input_value, expected, strategy_text in specs:
        try:
            strategy = parse_strategy(strategy_text)
        except SolcheckError as exc:
            raise click.BadParameter(str(exc), param_hint="--case") from exc
        cases.append(TestCase(input_value, expected, strategy))
    return cases


def _run_check(
    state: CliState,
    task: Task,
    solution: UserSolution,
    report_format: Optional[str],
    workers: Optional[int],
    timeout_s: Optional[float],
    no_color: bool,
) -> Submission:
    try:
        settings = state.settings.merged(
            report_format=report_format,
            workers=workers,
            timeout_s=timeout_s,
            color=False if no_color else None,
        )
        checker = Checker.from_settings(settings)
        manager = ReportManager(_build_reporters(settings))
        submission = manager.check(checker, solution, task)
    except SolcheckError as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    return submission


def _exit_code(submission: Submission) -> int:
    # Bonus slots of augmented suites count as failures.
    return 0 if submission.failed == 0 else 1


def _build_reporters(settings: CheckSettings) -> List[Reporter]:
    if settings.report_format == "terminal":
        return [TerminalReporter(use_color=settings.color)]
    return [StructuredReporter(settings.report_format)]


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="solcheck", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
