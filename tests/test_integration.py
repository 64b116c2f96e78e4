"""Integration tests for end-to-end workflows."""

from farmledger.cli.main import cli


def _invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])


def test_full_workflow(cli_runner, temp_db, payload_file):
    """Test complete workflow: user → import → add → series → summary → compare."""
    # Step 1: Create user
    result = _invoke(cli_runner, temp_db, "user", "create", "carol", "--occupation", "Poultry")
    assert result.exit_code == 0
    assert "Created user 'carol'" in result.output

    # Step 2: Import backend payload, which also replaces the occupations
    result = _invoke(cli_runner, temp_db, "import", str(payload_file), "--user", "carol")
    assert result.exit_code == 0
    assert "Imported 2 sales and 3 expenses" in result.output
    assert "Occupations: Poultry, Apiculture" in result.output

    # Step 3: Re-importing the same payload stores nothing new
    result = _invoke(cli_runner, temp_db, "import", str(payload_file), "--user", "carol")
    assert result.exit_code == 0
    assert "Imported 0 sales and 0 expenses" in result.output
    assert "Skipped 5 already imported records" in result.output

    # Step 4: Add a manual operating expense on the same day
    result = _invoke(
        cli_runner,
        temp_db,
        "add-expense",
        "--user",
        "carol",
        "--date",
        "2024-03-15",
        "--category",
        "Labour Salary",
        "--amount",
        "14.5",
        "--occupation",
        "Poultry",
    )
    assert result.exit_code == 0

    # Step 5: Daily series
    result = _invoke(
        cli_runner,
        temp_db,
        "series",
        "--user",
        "carol",
        "--days",
        "7",
        "--reference-date",
        "2024-03-15",
    )
    assert result.exit_code == 0
    assert "Financial series (generic, 7 days ending 2024-03-15)" in result.output
    last_line = result.output.strip().splitlines()[-1]
    assert last_line.startswith("2024-03-15")
    assert last_line.split()[1:] == ["250.00", "60.00", "190.00", "40.00", "150.00"]

    # Step 6: Weekly summary
    result = _invoke(
        cli_runner,
        temp_db,
        "summary",
        "--user",
        "carol",
        "--reference-date",
        "2024-03-15",
        "--weekly",
    )
    assert result.exit_code == 0
    assert "Financial Summary (2024-03-09 to 2024-03-15)" in result.output
    assert "370.00" in result.output

    # Step 7: Compare revenue with net profit
    result = _invoke(
        cli_runner,
        temp_db,
        "compare",
        "--user",
        "carol",
        "--reference-date",
        "2024-03-15",
        "--start-date",
        "2024-03-14",
        "--end-date",
        "2024-03-15",
        "--second",
        "net profit",
    )
    assert result.exit_code == 0
    assert "Revenue vs Net Profit (2024-03-14 to 2024-03-15)" in result.output
    assert "Page 1 of 1" in result.output
