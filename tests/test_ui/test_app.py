"""Smoke tests for the summarizer terminal UI."""

import pytest
from textual.widgets import Button, Input, TextArea

from meetnotes.core.events import DeliveryReceipt
from meetnotes.features.ui.app import MeetNotesApp
from meetnotes.features.ui.screens.summarizer import SummarizerScreen
from meetnotes.features.ui.widgets import SummaryView
from meetnotes.features.workflow.controller import SummaryWorkflow


@pytest.fixture
def ui_workflow(generator, delivery):
    return SummaryWorkflow(generator, delivery, default_recipient="team@example.com")


async def _screen(app, pilot) -> SummarizerScreen:
    await pilot.pause()
    screen = app.screen
    assert isinstance(screen, SummarizerScreen)
    return screen


@pytest.mark.asyncio
async def test_initial_form_hides_summary_and_email(ui_workflow):
    app = MeetNotesApp(workflow=ui_workflow)
    async with app.run_test(size=(120, 60)) as pilot:
        screen = await _screen(app, pilot)
        assert screen.query_one("#summary-panel").display is False
        assert screen.query_one("#email-panel").display is False
        assert screen.query_one("#btn-generate", Button).disabled is True
        assert screen.query_one("#instructions", TextArea).text == ui_workflow.state.instruction_prompt
        assert screen.query_one("#recipient", Input).value == "team@example.com"


@pytest.mark.asyncio
async def test_load_generate_edit_and_send(ui_workflow, generator, delivery, tmp_path):
    transcript = tmp_path / "standup.txt"
    transcript.write_text("Agenda: X", encoding="utf-8")

    app = MeetNotesApp(workflow=ui_workflow)
    async with app.run_test(size=(120, 60)) as pilot:
        screen = await _screen(app, pilot)
        shown = []
        screen.notify = lambda message, **kwargs: shown.append((message, kwargs))

        screen.query_one("#file-path", Input).value = str(transcript)
        screen.load_file()
        await pilot.pause()
        assert ui_workflow.state.transcript == "Agenda: X"
        assert screen.query_one("#transcript", TextArea).text == "Agenda: X"
        assert screen.query_one("#btn-generate", Button).disabled is False

        screen.action_generate()
        await app.workers.wait_for_complete()
        await pilot.pause()
        assert generator.calls == [("Agenda: X", ui_workflow.state.instruction_prompt)]
        assert screen.query_one("#summary-panel").display is True
        assert screen.query_one("#email-panel").display is True
        assert screen.query_one("#summary-view", SummaryView).summary == "**Decision**: proceed"
        assert shown[-1][1]["title"] == "Summary generated!"
        assert shown[-1][1]["severity"] == "information"

        screen.action_toggle_edit()
        await pilot.pause()
        assert ui_workflow.state.is_editing is True
        assert screen.query_one("#summary-editor", TextArea).display is True
        assert screen.query_one("#summary-editor", TextArea).text == "**Decision**: proceed"
        assert str(screen.query_one("#btn-edit", Button).label) == "Save"

        screen.action_toggle_edit()
        await pilot.pause()
        assert screen.query_one("#summary-view", SummaryView).display is True

        delivery.receipt = DeliveryReceipt(simulated=True, message="sandbox limit")
        screen.send_summary()
        await app.workers.wait_for_complete()
        await pilot.pause()
        assert delivery.calls == [("team@example.com", "**Decision**: proceed")]
        assert shown[-1] == ("sandbox limit", {"title": "Email simulated", "severity": "information"})


@pytest.mark.asyncio
async def test_rejected_file_shows_error(ui_workflow, tmp_path):
    image = tmp_path / "photo.png"
    image.write_bytes(b"\x89PNG")

    app = MeetNotesApp(workflow=ui_workflow)
    async with app.run_test(size=(120, 60)) as pilot:
        screen = await _screen(app, pilot)
        shown = []
        screen.notify = lambda message, **kwargs: shown.append((message, kwargs))

        screen.query_one("#file-path", Input).value = str(image)
        screen.load_file()
        await pilot.pause()

        assert ui_workflow.state.transcript == ""
        assert shown[-1][1] == {"title": "Invalid file type", "severity": "error"}


@pytest.mark.asyncio
async def test_new_summary_reloads_open_editor(ui_workflow, generator):
    ui_workflow.state.transcript = "Agenda: X"

    app = MeetNotesApp(workflow=ui_workflow)
    async with app.run_test(size=(120, 60)) as pilot:
        screen = await _screen(app, pilot)
        screen.notify = lambda message, **kwargs: None

        screen.action_generate()
        await app.workers.wait_for_complete()
        await pilot.pause()
        screen.action_toggle_edit()
        await pilot.pause()
        editor = screen.query_one("#summary-editor", TextArea)
        assert editor.text == "**Decision**: proceed"

        generator.summary = "# Second summary"
        screen.action_generate()
        await app.workers.wait_for_complete()
        await pilot.pause()
        assert ui_workflow.state.is_editing is True
        assert ui_workflow.state.summary == "# Second summary"
        assert editor.text == "# Second summary"


@pytest.mark.asyncio
async def test_cleared_summary_can_still_be_saved(ui_workflow):
    ui_workflow.state.summary = "# Draft"

    app = MeetNotesApp(workflow=ui_workflow)
    async with app.run_test(size=(120, 60)) as pilot:
        screen = await _screen(app, pilot)
        screen.action_toggle_edit()
        await pilot.pause()

        ui_workflow.edit_summary("")
        screen.refresh_controls()
        await pilot.pause()
        assert ui_workflow.state.summary == ""
        assert screen.query_one("#summary-panel").display is True

        screen.action_toggle_edit()
        await pilot.pause()
        assert ui_workflow.state.is_editing is False
        assert screen.query_one("#summary-panel").display is False


@pytest.mark.asyncio
async def test_recipient_notice_shown_only_when_given(ui_workflow):
    app = MeetNotesApp(workflow=ui_workflow, notice="Free tier only delivers to the account owner.")
    async with app.run_test(size=(120, 60)) as pilot:
        screen = await _screen(app, pilot)
        assert len(screen.query("#recipient-notice")) == 1

    app = MeetNotesApp(workflow=ui_workflow)
    async with app.run_test(size=(120, 60)) as pilot:
        screen = await _screen(app, pilot)
        assert len(screen.query("#recipient-notice")) == 0
