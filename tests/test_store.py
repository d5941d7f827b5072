"""Tests for the SQLite document store and typed persisted state."""

import copy

import pytest

from career_companion.config.store import DocumentStore, PersistedState, StoreKey
from career_companion.tracker.models import (
    MOCK_APPLICATIONS,
    MOCK_RESUME,
    ApplicationStatus,
    ContentType,
    DashboardFilters,
    FitAnalysis,
    InterviewPrep,
    InterviewQuestion,
)
from career_companion.tracker.repository import ApplicationRepository


class TestDocumentStore:
    """DocumentStore get/set semantics."""

    def test_absent_key_returns_default(self, store: DocumentStore) -> None:
        assert store.get(StoreKey.RESUME) is None
        assert store.get(StoreKey.RESUME, "fallback") == "fallback"

    def test_set_overwrites_whole_document(self, store: DocumentStore) -> None:
        store.set(StoreKey.FILTERS, {"status": "Applied", "company": "", "location": ""})
        store.set(StoreKey.FILTERS, {"status": "", "company": "Acme", "location": ""})

        assert store.get(StoreKey.FILTERS) == {"status": "", "company": "Acme", "location": ""}

    def test_corrupt_json_falls_back_to_default(self, store: DocumentStore) -> None:
        with store.get_connection() as conn:
            conn.execute(
                "INSERT INTO documents (key, value) VALUES (?, ?)",
                (StoreKey.PREFERENCES.value, "{not json"),
            )
        assert store.get(StoreKey.PREFERENCES, "") == ""

    def test_values_survive_reopen(self, tmp_path) -> None:
        path = str(tmp_path / "reopen.db")
        DocumentStore(path).set(StoreKey.TOUR_COMPLETED, True)
        assert DocumentStore(path).get(StoreKey.TOUR_COMPLETED) is True

    def test_stats_report_size_per_document(self, store: DocumentStore) -> None:
        store.set(StoreKey.RESUME, "hello")

        stats = store.get_stats()

        assert list(stats) == ["user-resume"]
        assert stats["user-resume"]["size"] == len('"hello"')
        assert stats["user-resume"]["updated_at"]


class TestPersistedState:
    """Defaults and round trips for each persisted document."""

    def test_defaults_on_first_run(self, persisted: PersistedState) -> None:
        applications = persisted.load_applications()

        assert [app.id for app in applications] == ["1", "2", "3", "4"]
        assert persisted.load_resume() == MOCK_RESUME
        assert persisted.load_preferences() == ""
        assert persisted.load_filters() == DashboardFilters()
        assert persisted.has_completed_tour() is False

    def test_default_applications_are_copies(self, persisted: PersistedState) -> None:
        applications = persisted.load_applications()
        applications[0].title = "Changed"
        assert MOCK_APPLICATIONS[0].title == "Senior Frontend Engineer"

    def test_applications_round_trip(self, persisted: PersistedState) -> None:
        app = copy.deepcopy(MOCK_APPLICATIONS[1])
        app.status = ApplicationStatus.INTERVIEW
        app.fit_analysis = FitAnalysis(fit_score=81, summary="Strong portfolio.", pros=["Figma"], cons=["No SQL"])
        app = app.with_content(ContentType.COVER_LETTER, "Dear team,")
        app = app.with_content(
            ContentType.INTERVIEW_PREP,
            InterviewPrep([InterviewQuestion("Behavioral", "Tell me about a redesign.", "Use STAR.")]),
        )

        persisted.save_applications([app])
        loaded = persisted.load_applications()

        assert loaded == [app]
        stored = persisted.store.get(StoreKey.APPLICATIONS)[0]
        assert stored["status"] == "Interview Center"
        assert stored["fitAnalysis"]["fitScore"] == 81
        assert stored["generatedContent"] == {
            "coverLetter": "Dear team,",
            "interviewPrep": {"questions": [
                {"type": "Behavioral", "question": "Tell me about a redesign.", "tip": "Use STAR."}
            ]},
        }

    def test_unreadable_applications_use_defaults(self, persisted: PersistedState) -> None:
        persisted.store.set(StoreKey.APPLICATIONS, [{"title": "no id"}])
        assert len(persisted.load_applications()) == len(MOCK_APPLICATIONS)

    @pytest.mark.parametrize("document", [
        "oops",
        {"id": "1"},
        [1, 2, 3],
        [{"id": "9", "generatedContent": "not an object"}],
    ])
    def test_wrong_shape_applications_use_defaults(self, persisted: PersistedState, document) -> None:
        persisted.store.set(StoreKey.APPLICATIONS, document)

        applications = persisted.load_applications()

        assert [app.id for app in applications] == ["1", "2", "3", "4"]

    def test_strings_filters_and_tour(self, persisted: PersistedState) -> None:
        persisted.save_resume("Jane Roe\nData Engineer")
        persisted.save_preferences("Remote only, Python roles")
        persisted.save_filters(DashboardFilters(company="acme"))
        persisted.mark_tour_completed()

        assert persisted.load_resume() == "Jane Roe\nData Engineer"
        assert persisted.load_preferences() == "Remote only, Python roles"
        assert persisted.load_filters() == DashboardFilters(company="acme")
        assert persisted.has_completed_tour() is True

    def test_repository_changes_are_written_through(self, persisted: PersistedState) -> None:
        repository = ApplicationRepository(
            persisted.load_applications(), on_change=persisted.applications_writer()
        )
        app = repository.add({"title": "Data Engineer", "company": "Acme", "url": "https://acme.example/jobs/1"})

        reloaded = persisted.load_applications()
        assert reloaded[0].id == app.id
        assert len(reloaded) == 5
