"""Tests for the CLI module."""

import json
from unittest.mock import MagicMock, patch

import pytest

from archive_scraper.cli import main


def _mock_archive_client(page):
    client = MagicMock()
    client.__enter__ = MagicMock(return_value=client)
    client.__exit__ = MagicMock(return_value=False)
    client.fetch = MagicMock(return_value=page)
    return client


class TestCLIRun:
    """Tests for the run command."""

    def test_run_requires_range(self):
        """run exits with a usage error without --start and --end."""
        with pytest.raises(SystemExit):
            main(["run", "--mode", "all-metadata"])

    def test_run_rejects_unknown_mode(self):
        with pytest.raises(SystemExit):
            main(["run", "--mode", "everything", "--start", "1", "--end", "2"])

    def test_run_rejects_reversed_range(self, tmp_path, caplog):
        """run fails when --end is before --start."""
        result = main([
            "run",
            "--start", "10",
            "--end", "5",
            "--root", str(tmp_path),
        ])

        assert result == 1
        assert "Invalid run configuration" in caplog.text

    def test_run_rejects_non_positive_ids(self, tmp_path, caplog):
        result = main(["run", "--start", "0", "--end", "5", "--root", str(tmp_path)])

        assert result == 1
        assert "Invalid run configuration" in caplog.text

    @patch("archive_scraper.cli.ArchiveClient")
    def test_run_all_metadata(self, mock_client_class, tmp_path, sample_article_page):
        """run writes the metadata summary for the range."""
        mock_client = _mock_archive_client(sample_article_page)
        mock_client_class.return_value = mock_client

        result = main([
            "run",
            "--mode", "all-metadata",
            "--start", "100",
            "--end", "101",
            "--persist-bodies",
            "--root", str(tmp_path),
        ])

        assert result == 0
        assert [c.args[0] for c in mock_client.fetch.call_args_list] == [100, 101]
        summary = tmp_path / "ScrapedFiles" / "Summary" / "METADATASUMMARY_100_101.csv"
        assert summary.read_text().splitlines() == [
            "Id,Date,Title,Author,Length",
            "100,August 25 2010,Manufactured Runs,Colin Wyers,42",
            "101,August 25 2010,Manufactured Runs,Colin Wyers,42",
        ]
        assert (tmp_path / "ScrapedFiles" / "100.txt").exists()

    @patch("archive_scraper.cli.ArchiveClient")
    def test_run_passes_base_url(self, mock_client_class, tmp_path, sample_article_page):
        mock_client_class.return_value = _mock_archive_client(sample_article_page)

        main([
            "run",
            "--start", "1",
            "--end", "1",
            "--root", str(tmp_path),
            "--base-url", "http://archive.example.com",
        ])

        config = mock_client_class.call_args.args[0]
        assert config["base_url"] == "http://archive.example.com"

    def test_run_offline_metadata(self, tmp_path):
        """Offline mode summarizes stored bodies without fetching."""
        scraped = tmp_path / "ScrapedFiles"
        scraped.mkdir()
        (scraped / "3.txt").write_text("abc", encoding="utf-8")

        result = main([
            "run",
            "--mode", "offline-metadata",
            "--start", "3",
            "--end", "4",
            "--root", str(tmp_path),
        ])

        assert result == 0
        summary = scraped / "Summary" / "OFFLINEMETADATASUMMARY_3_4.csv"
        assert summary.read_text().splitlines() == ["Id,Length", "3,3", "4,0"]

    def test_run_existing_summary_succeeds(self, tmp_path):
        """An existing summary is not an error."""
        summary = tmp_path / "ScrapedFiles" / "Summary" / "OFFLINEMETADATASUMMARY_1_1.csv"
        summary.parent.mkdir(parents=True)
        summary.write_text("kept\n")

        result = main([
            "run",
            "--mode", "offline-metadata",
            "--start", "1",
            "--end", "1",
            "--root", str(tmp_path),
        ])

        assert result == 0
        assert summary.read_text() == "kept\n"

    @patch("archive_scraper.cli.ArchiveClient")
    def test_run_stop_on_fetch_error(self, mock_client_class, tmp_path, caplog):
        """With --stop-on-fetch-error a failed fetch aborts the run."""
        from archive_scraper.clients import ConnectionError

        mock_client = _mock_archive_client("")
        mock_client.fetch.side_effect = ConnectionError("unreachable")
        mock_client_class.return_value = mock_client

        result = main([
            "run",
            "--start", "1",
            "--end", "3",
            "--root", str(tmp_path),
            "--stop-on-fetch-error",
        ])

        assert result == 1
        assert mock_client.fetch.call_count == 1
        assert "Run failed: unreachable" in caplog.text

    @patch("archive_scraper.cli.SentimentInvoker")
    def test_run_sentiment_configures_invoker(self, mock_invoker_class, tmp_path):
        """Annotator options are passed to the SentimentInvoker."""
        from schemas.sentiment import SentimentOutcome

        mock_invoker_class.return_value.invoke.return_value = SentimentOutcome(
            total=2.0, sentences=4
        )

        result = main([
            "run",
            "--mode", "sentiment",
            "--start", "1",
            "--end", "1",
            "--root", str(tmp_path),
            "--java", "/usr/bin/java",
            "--heap", "4g",
            "--timeout", "600",
            "--average",
        ])

        assert result == 0
        kwargs = mock_invoker_class.call_args.kwargs
        assert kwargs == {"java": "/usr/bin/java", "heap_size": "4g", "timeout": 600.0}
        summary = tmp_path / "ScrapedFiles" / "Summary" / "SENTIMENTSUMMARY_1_1.csv"
        assert summary.read_text().splitlines() == ["Id,Sentiment,Sentences", "1,0.5,4"]


class TestCLIExtract:
    """Tests for the extract command."""

    def test_extract_prints_fields(self, tmp_path, sample_article_page, capsys):
        html_path = tmp_path / "100.html"
        html_path.write_text(sample_article_page, encoding="utf-8")

        result = main(["extract", "--html", str(html_path)])

        assert result == 0
        report = json.loads(capsys.readouterr().out)
        assert report == {
            "date": "August 25 2010",
            "title": "Manufactured Runs",
            "author": "Colin Wyers",
            "length": 42,
        }

    def test_extract_missing_file(self, tmp_path, caplog):
        result = main(["extract", "--html", str(tmp_path / "missing.html")])

        assert result == 1
        assert "HTML file not found" in caplog.text


class TestCLIHelp:
    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "archive-scraper" in capsys.readouterr().out
