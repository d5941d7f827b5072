"""Tests for per-application AI actions on the job detail view."""

import asyncio

import pytest

from career_companion.ai_processing.career_assistant import CareerAssistant
from career_companion.ai_processing.results import PARSE_ERROR_MESSAGE
from career_companion.tracker.models import ContentType, FitAnalysis
from career_companion.tracker.repository import ApplicationRepository
from career_companion.tracker.workbench import ApplicationWorkbench, WorkbenchAction

from conftest import FakeProvider, failed_response, json_response, text_response

FIT_PAYLOAD = {"fitScore": 78, "summary": "Solid.", "pros": ["Figma"], "cons": ["No research"]}


@pytest.fixture
def workbench(assistant: CareerAssistant, repository: ApplicationRepository, resume: str) -> ApplicationWorkbench:
    return ApplicationWorkbench(assistant, repository, lambda: resume)


class TestAnalyzeFit:
    async def test_result_is_stored_on_the_application(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(json_response(FIT_PAYLOAD))

        updated = await workbench.analyze_fit("2")

        expected = FitAnalysis(78, "Solid.", ["Figma"], ["No research"])
        assert updated.fit_analysis == expected
        assert repository.get("2").fit_analysis == expected
        assert not workbench.is_loading("2", WorkbenchAction.ANALYSIS)

    async def test_failure_records_error_and_keeps_record(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(failed_response())

        assert await workbench.analyze_fit("2") is None

        assert workbench.error_for("2", WorkbenchAction.ANALYSIS) == "Failed to analyze job fit. Please try again."
        assert repository.get("2").fit_analysis is None

    async def test_unparseable_reply_leaves_analysis_empty(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(text_response("not json"))

        assert await workbench.analyze_fit("2") is None

        assert repository.get("2").fit_analysis is None
        assert workbench.error_for("2", WorkbenchAction.ANALYSIS) == (
            f"Failed to analyze job fit. Please try again. {PARSE_ERROR_MESSAGE}"
        )
        assert not workbench.is_loading("2", WorkbenchAction.ANALYSIS)

    async def test_unknown_application(self, workbench: ApplicationWorkbench, provider: FakeProvider) -> None:
        assert await workbench.analyze_fit("missing") is None
        assert provider.requests == []


class TestContent:
    async def test_generate_replaces_only_one_slot(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(text_response("Dear Creative Solutions,"), text_response("- Shipped a design system"))

        await workbench.generate("2", ContentType.COVER_LETTER)
        await workbench.generate("2", ContentType.RESUME_BULLETS)

        app = repository.get("2")
        assert app.content(ContentType.COVER_LETTER) == "Dear Creative Solutions,"
        assert app.content(ContentType.RESUME_BULLETS) == "- Shipped a design system"
        assert app.content(ContentType.OUTREACH_PITCH) is None

    async def test_improve_rewrites_existing_text(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(text_response("Short pitch."), text_response("Sharper pitch."))
        await workbench.generate("1", ContentType.OUTREACH_PITCH)

        await workbench.improve("1", ContentType.OUTREACH_PITCH)

        assert "Short pitch." in provider.last_request.contents
        assert repository.get("1").content(ContentType.OUTREACH_PITCH) == "Sharper pitch."

    async def test_improve_without_text_does_nothing(
        self, workbench: ApplicationWorkbench, provider: FakeProvider
    ) -> None:
        assert await workbench.improve("1", ContentType.COVER_LETTER) is None
        assert provider.requests == []

    async def test_interview_prep_is_not_a_text_action(self, workbench: ApplicationWorkbench) -> None:
        with pytest.raises(ValueError):
            await workbench.generate("1", ContentType.INTERVIEW_PREP)

    async def test_prepare_interview(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(json_response({"questions": [
            {"type": "Situational", "question": "A launch slips a week. What do you do?", "tip": "Prioritize."}
        ]}))

        await workbench.prepare_interview("4")

        prep = repository.get("4").content(ContentType.INTERVIEW_PREP)
        assert len(prep.questions) == 1

    async def test_unparseable_interview_reply_stores_nothing(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(text_response("not json"))

        assert await workbench.prepare_interview("4") is None

        assert repository.get("4").content(ContentType.INTERVIEW_PREP) is None
        assert workbench.error_for("4", WorkbenchAction.INTERVIEW_PREP) == (
            f"Failed to generate interview questions. {PARSE_ERROR_MESSAGE}"
        )


class TestConcurrency:
    async def test_parallel_results_for_different_fields_both_survive(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.gate = asyncio.Event()
        provider.queue(json_response(FIT_PAYLOAD), text_response("Dear team,"))

        analysis = asyncio.create_task(workbench.analyze_fit("3"))
        letter = asyncio.create_task(workbench.generate("3", ContentType.COVER_LETTER))
        await asyncio.sleep(0)
        assert workbench.is_busy("3")

        provider.gate.set()
        await asyncio.gather(analysis, letter)

        app = repository.get("3")
        assert app.fit_analysis is not None
        assert app.content(ContentType.COVER_LETTER) == "Dear team,"

    async def test_duplicate_action_is_ignored_while_loading(
        self, workbench: ApplicationWorkbench, provider: FakeProvider
    ) -> None:
        provider.gate = asyncio.Event()
        provider.queue(json_response(FIT_PAYLOAD))

        first = asyncio.create_task(workbench.analyze_fit("3"))
        await asyncio.sleep(0)
        assert await workbench.analyze_fit("3") is None

        provider.gate.set()
        assert (await first) is not None
        assert len(provider.requests) == 1


class TestResearch:
    async def test_research_is_cached_for_the_session(
        self, workbench: ApplicationWorkbench, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(text_response("**Overview**: CloudWorks runs data centers."))

        briefing = await workbench.research_company("4")

        assert workbench.research_for("4") == briefing
        assert "CloudWorks" in provider.last_request.contents
        assert repository.get("4").generated_content is None

    async def test_failed_research(self, workbench: ApplicationWorkbench, provider: FakeProvider) -> None:
        provider.queue(failed_response())

        assert await workbench.research_company("4") is None

        assert workbench.error_for("4", WorkbenchAction.RESEARCH) == "Failed to research company."
        workbench.clear_error("4", WorkbenchAction.RESEARCH)
        assert workbench.error_for("4", WorkbenchAction.RESEARCH) is None
