"""Tests for saving chat citations to the tracker."""

import pytest

from career_companion.ai_processing.career_assistant import CareerAssistant
from career_companion.ai_processing.llm_manager import Source
from career_companion.chat.save_tracker import InvalidSaveTransition, SaveState, SourceSaveTracker
from career_companion.tracker.repository import ApplicationRepository

from conftest import FakeProvider, failed_response, json_response

SOURCE = Source("https://jobs.example/listing/7", "Backend Engineer - Globex")

JOB_PAYLOAD = {
    "title": "Backend Engineer",
    "company": "Globex",
    "location": "Berlin",
    "description": "Design APIs.",
    "url": "https://jobs.example/listing/7",
}


@pytest.fixture
def tracker(assistant: CareerAssistant, repository: ApplicationRepository) -> SourceSaveTracker:
    return SourceSaveTracker(assistant, repository)


class TestSave:
    async def test_successful_save(
        self, tracker: SourceSaveTracker, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(json_response(JOB_PAYLOAD))

        app = await tracker.save(SOURCE)

        assert app is not None
        assert repository.all()[0] is app
        assert tracker.state(SOURCE.uri) is SaveState.SAVED
        button = tracker.button(SOURCE.uri)
        assert button.disabled
        assert button.already_saved
        assert button.label == "Already Saved"

    async def test_failure_then_retry(
        self, tracker: SourceSaveTracker, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        provider.queue(failed_response(), json_response(JOB_PAYLOAD))

        assert await tracker.save(SOURCE) is None
        assert tracker.state(SOURCE.uri) is SaveState.ERROR
        assert tracker.error(SOURCE.uri) == "Failed to extract job details from the URL."
        assert tracker.button(SOURCE.uri).label == "Retry Save"
        assert not tracker.button(SOURCE.uri).disabled
        assert len(repository) == 4

        assert await tracker.save(SOURCE) is not None
        assert tracker.state(SOURCE.uri) is SaveState.SAVED
        assert tracker.error(SOURCE.uri) is None

    async def test_already_tracked_url_is_never_saved_again(
        self, tracker: SourceSaveTracker, provider: FakeProvider, repository: ApplicationRepository
    ) -> None:
        repository.add(JOB_PAYLOAD)

        assert tracker.button(SOURCE.uri).disabled
        assert await tracker.save(SOURCE) is None
        assert provider.requests == []
        assert len(repository) == 5

    async def test_saved_url_stays_disabled_even_if_its_application_url_changes(
        self, tracker: SourceSaveTracker, provider: FakeProvider
    ) -> None:
        provider.queue(json_response(dict(JOB_PAYLOAD, url="https://globex.example/apply")))

        await tracker.save(SOURCE)

        button = tracker.button(SOURCE.uri)
        assert button.label == "Saved"
        assert button.disabled


class TestTransitions:
    def test_idle_button(self, tracker: SourceSaveTracker) -> None:
        button = tracker.button("https://new.example/job")
        assert button.label == "Save to Tracker"
        assert not button.disabled
        assert button.state is SaveState.IDLE

    def test_saving_button_is_disabled(self, tracker: SourceSaveTracker) -> None:
        tracker.transition("https://new.example/job", SaveState.SAVING)
        button = tracker.button("https://new.example/job")
        assert button.label == "Saving..."
        assert button.disabled

    @pytest.mark.parametrize("path", [
        [SaveState.SAVED],
        [SaveState.SAVING, SaveState.SAVED, SaveState.SAVING],
        [SaveState.SAVING, SaveState.IDLE],
    ])
    def test_illegal_transitions(self, tracker: SourceSaveTracker, path) -> None:
        uri = "https://new.example/job"
        *allowed, illegal = path
        for state in allowed:
            tracker.transition(uri, state)
        with pytest.raises(InvalidSaveTransition):
            tracker.transition(uri, illegal)
