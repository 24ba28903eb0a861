from flight_quality.cli import main


class TestCli:
    def test_prints_report(self, flights_csv, csv_header, capsys):
        path = flights_csv(csv_header + "1,N123,B738,AA123,,2024-03-01 08:00:00,LAX,2024-03-01 10:00:00\n")

        assert main([str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Missing Data Inconsistencies:",
            "Flight AA123: Missing Departure Airport.",
        ]

    def test_custom_turnaround_minutes(self, flights_csv, csv_header, capsys):
        path = flights_csv(
            csv_header
            + "1,N1,B738,A1,JFK,2024-03-01 08:00:00,LAX,2024-03-01 10:00:00\n"
            + "2,N1,B738,A2,LAX,2024-03-01 13:00:00,SFO,2024-03-01 15:00:00\n"
        )

        assert main([str(path), "60"]) == 0
        assert capsys.readouterr().out.strip() == "No inconsistencies found in the flight data."

        assert main([str(path), "240"]) == 0
        assert "departs 180 minutes after arriving at LAX" in capsys.readouterr().out

    def test_usage_without_arguments(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_invalid_minutes(self, flights_csv, csv_header, capsys):
        assert main([str(flights_csv(csv_header)), "soon"]) == 1
        assert "Invalid turnaround minutes" in capsys.readouterr().out

    def test_infinite_minutes(self, flights_csv, csv_header, capsys):
        assert main([str(flights_csv(csv_header)), "inf"]) == 1
        assert "Invalid turnaround minutes: inf" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.csv")]) == 1
        assert capsys.readouterr().out.startswith("Error:")
