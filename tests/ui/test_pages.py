from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from synthdata_ui.context import CurrentUser, SessionContext
from synthdata_ui.custom_pages import generate, upload
from synthdata_ui.navigation import DashboardState, View


@pytest.fixture
def ctx():
    return SessionContext(api=MagicMock(), user=CurrentUser(id="u-1", email="analyst@synthdata.co.ke"))


@pytest.fixture
def st(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr(upload, "st", mock)
    monkeypatch.setattr(generate, "st", mock)
    return mock


def _file(name="loans.csv", type_="text/csv", content=b"a,b\n1,2\n"):
    return SimpleNamespace(name=name, type=type_, getvalue=lambda: content)


def test_generate_without_dataset_shows_empty_state(ctx, st):
    generate.main(ctx, DashboardState(view=View.GENERATE))

    st.subheader.assert_called_once_with("No Dataset Selected")
    st.info.assert_called_once_with("Please upload a dataset first")
    ctx.api.get_dataset.assert_not_called()


def test_upload_without_project_shows_empty_state(ctx, st):
    upload.main(ctx, DashboardState(view=View.UPLOAD))

    st.subheader.assert_called_once_with("No Project Selected")
    st.info.assert_called_once_with("Please select or create a project first")
    ctx.api.list_templates.assert_not_called()


@pytest.mark.parametrize("uploaded, name, message", [
    (None, "Loans", "Please choose a CSV file"),
    (_file(name="loans.xlsx", type_="application/vnd.ms-excel"), "Loans", "Please upload a CSV file"),
    (_file(), "   ", "Dataset name is required"),
])
def test_invalid_upload_is_rejected_before_any_request(ctx, uploaded, name, message):
    with pytest.raises(ValueError, match=message):
        upload.create_from_file(ctx, "p-1", uploaded, name, "")

    ctx.api.upload_dataset.assert_not_called()


def test_valid_upload_is_sent(ctx):
    ctx.api.upload_dataset.return_value = {"id": "d-1"}

    dataset = upload.create_from_file(ctx, "p-1", _file(), " Loans ", "Q4")

    assert dataset == {"id": "d-1"}
    ctx.api.upload_dataset.assert_called_once_with("p-1", "Loans", "Q4", "loans.csv", b"a,b\n1,2\n", "text/csv")


def test_finished_upload_moves_to_generate(st, monkeypatch):
    sleeps = []
    monkeypatch.setattr(upload.time, "sleep", sleeps.append)
    state = DashboardState(view=View.UPLOAD, selected_project_id="p-1")

    upload.finish(state, {"id": "d-1"})

    assert state.view == View.GENERATE
    assert state.selected_dataset_id == "d-1"
    assert sleeps == [upload.UPLOAD_REDIRECT_DELAY]
    st.success.assert_called_once_with("Dataset Uploaded Successfully")
    st.rerun.assert_called_once()


@pytest.mark.parametrize("source_rows, expected", [
    (10, 1000),
    (50_000, 50_000),
    (1_000_000, 1_000_000),
    (1_200_000, 1_000_000),
])
def test_default_row_count_stays_within_the_input_range(source_rows, expected):
    assert generate.default_row_count(source_rows) == expected


def test_generate_form_for_a_large_dataset_defaults_to_the_maximum(ctx, st):
    st.form_submit_button.return_value = False
    dataset = {"id": "d-1", "name": "Loan book", "row_count": 1_200_000, "schema_json": []}

    generate._generation_form(ctx, DashboardState(view=View.GENERATE, selected_dataset_id="d-1"), dataset)

    rows_input = st.number_input.call_args_list[0]
    assert rows_input.kwargs["value"] == 1_000_000
    assert rows_input.kwargs["value"] <= rows_input.kwargs["max_value"]
    ctx.api.create_generation.assert_not_called()
