# main.py
""""" Entry point for the calculator.

   Responsibilities:
   - Evaluate expressions given on the command line, or
   - Verify required files exist, load configuration and start the Qt GUI

   Usage:
       python main.py                 -> GUI
       python main.py "2+3*4" "5!"    -> prints "2+3*4 = 14", "5! = 120"
       python main.py --debug ...     -> verbose logging

"""""
import logging
import sys
from pathlib import Path

from Calculator import config_manager as config_manager
from Calculator import error as E
from Calculator import MathEngine as MathEngine
from Calculator import history_manager as history_manager

logger = logging.getLogger("calculator")

PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast if required files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "Calculator"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "MathEngine.py",
        modules_dir / "ScientificEngine.py",
        modules_dir / "Operations.py",
        modules_dir / "Validator.py",
        modules_dir / "config_manager.py",
        modules_dir / "history_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        logger.error("The following files are missing or in the wrong location: %s",
                     ", ".join(missing_files))
        return False
    return True


def run_expressions(expressions, out=None):

    """
    Evaluate every expression and print one line per expression.
    Returns the process exit status: 0 if all succeeded, 1 otherwise.
    """

    out = out or sys.stdout
    decimal_places = config_manager.load_setting_value("decimal_places")
    status = 0

    for expression in expressions:
        outcome = MathEngine.evaluate(expression)
        if outcome.error is not None:
            error_obj = outcome.error
            headline = E.ERROR_MESSAGES.get(error_obj.code, "Unknown error")
            print(f"Error {error_obj.code}: {headline} ({error_obj.message})", file=out)
            status = 1
            continue

        rendered, rounded = MathEngine.format_result(outcome.value, decimal_places)
        if rounded:
            print(f"{expression} ≈ {rendered}", file=out)
        else:
            print(history_manager.format_entry(expression, rendered), file=out)

    return status


def main(argv=None):

    """
    - Keep this thin: no business logic here.
    """

    args = list(sys.argv[1:] if argv is None else argv)
    debug = "--debug" in args
    if debug:
        args.remove("--debug")

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args:
        return run_expressions(args)

    if not check_files_exist():
        return 1

    all_settings = config_manager.load_setting_value("all")
    logger.debug("Config loaded: %s", all_settings)

    # The GUI is imported here so the command line mode works without a display.
    from Calculator import UI as UI
    return UI.main()


if __name__ == "__main__":
    sys.exit(main())
