"""
End-to-end tests for the pipeline and the command-line entry point.
The network, the model SDK and the clipboard are mocked.
"""

import asyncio
import dataclasses
import os
from types import SimpleNamespace
from unittest import mock
from unittest.mock import AsyncMock

import pyperclip
import pytest

from graderace.cli import COMMAND, RunOptions, build_parser, main, parse_options
from graderace.exceptions import FetchError, NoContentError
from graderace.graderace import RaceSummarizer

from conftest import RACE_URL


@pytest.fixture
def page_response(make_response, race_page):
    """Patch requests.get to serve the race page."""
    with mock.patch(
        "graderace.processors.fetcher.requests.get",
        return_value=make_response(race_page())
    ) as get:
        yield get


@pytest.fixture
def clipboard():
    with mock.patch("graderace.output.pyperclip.copy") as copy:
        yield copy


@pytest.fixture
def gemini(gemini_response):
    with mock.patch("graderace.providers.gemini.genai.Client") as client_class:
        client = client_class.return_value
        client.aio.models.generate_content = AsyncMock(return_value=gemini_response(["Summary: ..."]))
        client.aio.aclose = AsyncMock()
        yield client_class


@pytest.fixture
def cli_args(tmp_path):
    """Arguments that keep a developer's .env out of the run."""
    return [RACE_URL, "--env-file", str(tmp_path / "missing.env")]


class TestRaceSummarizer:
    """Test the fetch -> extract -> summarize pipeline"""

    def test_summarize_url(self, config, dummy_provider, page_response):
        result = RaceSummarizer(config, dummy_provider).summarize_url_sync(RACE_URL)

        assert result.text == "Summary: ..."
        assert result.source_url == RACE_URL
        assert dummy_provider.calls == [
            ("次の文章を要約してください。 Race Result Data", "gemini-2.5-flash")
        ]

    def test_pro_model(self, config, dummy_provider, page_response):
        result = RaceSummarizer(config, dummy_provider).summarize_url_sync(RACE_URL, "pro")

        assert result.model == "gemini-2.5-pro"
        assert dummy_provider.last_model == "gemini-2.5-pro"

    @pytest.mark.asyncio
    async def test_summarize_url_async(self, config, dummy_provider, page_response):
        result = await RaceSummarizer(config, dummy_provider).summarize_url(RACE_URL)
        assert str(result) == "Summary: ..."

    def test_sync_wrapper_inside_running_loop(self, config, dummy_provider, page_response):
        async def caller():
            return RaceSummarizer(config, dummy_provider).summarize_url_sync(RACE_URL)

        assert asyncio.run(caller()).text == "Summary: ..."

    def test_japanese_content(self, config, dummy_provider, make_response, race_page):
        body = race_page("<table><tr><td>1着</td><td>ドウデュース</td></tr></table>")

        with mock.patch("graderace.processors.fetcher.requests.get", return_value=make_response(body)):
            RaceSummarizer(config, dummy_provider).summarize_url_sync(RACE_URL)

        prompt, _ = dummy_provider.calls[0]
        assert prompt == "次の文章を要約してください。 1着ドウデュース"

    def test_missing_container_fails_fast(self, config, dummy_provider, make_response):
        body = "<html><body><p>メンテナンス中</p></body></html>".encode("cp932")

        with mock.patch("graderace.processors.fetcher.requests.get", return_value=make_response(body)):
            with pytest.raises(NoContentError) as excinfo:
                RaceSummarizer(config, dummy_provider).summarize_url_sync(RACE_URL)

        assert excinfo.value.url == RACE_URL
        assert dummy_provider.calls == []

    def test_fetch_error_stops_pipeline(self, config, dummy_provider, make_response):
        with mock.patch(
            "graderace.processors.fetcher.requests.get",
            return_value=make_response(b"", status_code=500)
        ):
            with pytest.raises(FetchError):
                RaceSummarizer(config, dummy_provider).summarize_url_sync(RACE_URL)

        assert dummy_provider.calls == []

    def test_stats(self, config, dummy_provider):
        stats = RaceSummarizer(config, dummy_provider).get_stats()
        assert stats["container_selector"] == "div#main_contents"
        assert stats["summarizer"]["provider"] == "dummy"


class TestCommandLine:
    """Test argument parsing"""

    def test_defaults(self):
        options = parse_options([RACE_URL])

        assert options == RunOptions(url=RACE_URL)
        assert options.model == "flash"
        assert options.provider is None

    def test_flags(self):
        options = parse_options([RACE_URL, "-m", "pro", "--provider", "openai", "--no-clipboard", "-v"])

        assert options.model == "pro"
        assert options.provider == "openai"
        assert options.no_clipboard is True
        assert options.verbose is True

    def test_options_are_immutable(self):
        options = parse_options([RACE_URL])
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.url = "https://other.example/"

    def test_url_is_required(self):
        with pytest.raises(SystemExit):
            parse_options([])

    def test_unknown_provider_rejected(self):
        with pytest.raises(SystemExit):
            parse_options([RACE_URL, "--provider", "cohere"])

    def test_parser_is_built_from_command(self):
        parser = build_parser(COMMAND)
        assert parser.prog == "graderace"
        assert "--model" in parser.format_help()


class TestMain:
    """Test the CLI entry point against mocked network, model and clipboard"""

    def test_success(self, monkeypatch, capsys, cli_args, page_response, gemini, clipboard):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        assert main(cli_args) == 0

        assert capsys.readouterr().out == "Summary: ...\n"
        clipboard.assert_called_once_with("Summary: ...")
        client = gemini.return_value
        kwargs = client.aio.models.generate_content.await_args.kwargs
        assert kwargs["contents"] == "次の文章を要約してください。 Race Result Data"
        assert kwargs["model"] == "gemini-2.5-flash"

    def test_pro_flag(self, monkeypatch, cli_args, page_response, gemini, clipboard):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        assert main(cli_args + ["--model", "pro"]) == 0

        kwargs = gemini.return_value.aio.models.generate_content.await_args.kwargs
        assert kwargs["model"] == "gemini-2.5-pro"

    def test_http_failure(self, monkeypatch, capsys, cli_args, make_response, gemini, clipboard):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        with mock.patch(
            "graderace.processors.fetcher.requests.get",
            return_value=make_response(b"gone", status_code=404)
        ):
            assert main(cli_args) == 1

        assert capsys.readouterr().out == ""
        clipboard.assert_not_called()
        gemini.assert_not_called()

    def test_missing_credential(self, capsys, cli_args, page_response, gemini, clipboard):
        assert main(cli_args) == 1

        gemini.assert_not_called()
        page_response.assert_not_called()
        clipboard.assert_not_called()
        assert capsys.readouterr().out == ""

    def test_credential_from_env_file(self, tmp_path, page_response, gemini, clipboard):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=dotenv-key\n")

        try:
            assert main([RACE_URL, "--env-file", str(env_file)]) == 0
        finally:
            os.environ.pop("GEMINI_API_KEY", None)

        gemini.assert_called_once_with(api_key="dotenv-key")

    def test_clipboard_failure_is_not_fatal(self, monkeypatch, capsys, cli_args, page_response, gemini):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        with mock.patch(
            "graderace.output.pyperclip.copy",
            side_effect=pyperclip.PyperclipException("no clipboard mechanism")
        ):
            assert main(cli_args) == 0

        assert capsys.readouterr().out == "Summary: ...\n"

    def test_no_clipboard(self, monkeypatch, capsys, cli_args, page_response, gemini, clipboard):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        assert main(cli_args + ["--no-clipboard"]) == 0

        clipboard.assert_not_called()
        assert capsys.readouterr().out == "Summary: ...\n"

    def test_truncated_generation_fails(self, monkeypatch, capsys, cli_args, page_response, gemini, clipboard):
        """A pro run that spends its budget thinking must not print or copy a blank summary"""
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        generate = gemini.return_value.aio.models.generate_content
        generate.return_value = SimpleNamespace(candidates=[
            SimpleNamespace(content=SimpleNamespace(parts=None), finish_reason="MAX_TOKENS")
        ])

        assert main(cli_args + ["-m", "pro"]) == 1

        assert capsys.readouterr().out == ""
        clipboard.assert_not_called()
        assert generate.await_args.kwargs["config"].max_output_tokens is None

    def test_api_failure(self, monkeypatch, capsys, cli_args, page_response, gemini, clipboard):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        gemini.return_value.aio.models.generate_content.side_effect = RuntimeError("403 PERMISSION_DENIED")

        assert main(cli_args) == 1

        assert capsys.readouterr().out == ""
        clipboard.assert_not_called()
