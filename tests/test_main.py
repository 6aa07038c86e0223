import io

import main


def test_run_expressions_prints_results():
    out = io.StringIO()
    status = main.run_expressions(["2+3*4", "5!", "sin(30)"], out=out)

    assert status == 0
    assert out.getvalue().splitlines() == ["2+3*4 = 14", "5! = 120", "sin(30) = 0.5"]


def test_run_expressions_marks_rounded_results():
    out = io.StringIO()
    main.run_expressions(["1/3"], out=out)
    assert out.getvalue().startswith("1/3 ≈ 0.333")


def test_run_expressions_reports_errors():
    out = io.StringIO()
    status = main.run_expressions(["5/0", "1+1"], out=out)

    lines = out.getvalue().splitlines()
    assert status == 1
    assert lines[0].startswith("Error 3003: Division by Zero")
    assert lines[1] == "1+1 = 2"


def test_main_with_arguments_does_not_start_gui(capsys):
    assert main.main(["2^3"]) == 0
    assert capsys.readouterr().out.strip() == "2^3 = 8"


def test_required_files_exist():
    assert main.check_files_exist()


def test_run_expressions_survives_bad_decimal_places(tmp_path, monkeypatch):
    config_file = tmp_path / "config.json"
    config_file.write_text('{"decimal_places": "4"}', encoding="utf-8")
    monkeypatch.setattr(main.config_manager, "config_json", config_file)

    out = io.StringIO()
    assert main.run_expressions(["1/3"], out=out) == 0
    assert out.getvalue().startswith("1/3 ≈ 0.333")
