from __future__ import annotations

import logging

import pytest

from smart_screener import pipeline
from smart_screener.errors import InvalidInputError, ResumeNotFoundError, UnsupportedFormatError
from smart_screener.settings import MatchSettings

JOB_TEXT = "Looking for a Python developer with SQL experience"


def test_score_resume_from_text_file(make_text_file):
    path = make_text_file("Python developer with strong SQL skills")

    result = pipeline.score_resume(path, "Backend Developer", JOB_TEXT)

    assert 0.0 < result.score < 1.0
    terms = [entry.term for entry in result.top_overlap]
    assert {"python", "developer", "sql"} <= set(terms)
    assert "strong" not in terms
    assert "experience" not in terms
    assert result.resume_preview == "Python developer with strong SQL skills"
    assert result.job_title == "Backend Developer"


def test_score_resume_from_pdf(make_pdf):
    path = make_pdf(["Python developer", "SQL and cloud skills"])

    result = pipeline.score_resume(path, "Backend Developer", JOB_TEXT)

    assert result.score > 0.0
    assert {"python", "developer", "sql"} <= {entry.term for entry in result.top_overlap}


def test_job_title_does_not_affect_score(make_text_file):
    path = make_text_file("Python developer with strong SQL skills")

    first = pipeline.score_resume(path, "Engineer", JOB_TEXT)
    second = pipeline.score_resume(path, "Completely different title", JOB_TEXT)

    assert first.score == second.score
    assert first.top_overlap == second.top_overlap


@pytest.mark.parametrize(
    ("title", "text"),
    [("", JOB_TEXT), ("   ", JOB_TEXT), ("Engineer", ""), ("Engineer", " \n\t ")],
)
def test_blank_inputs_are_rejected_before_reading(tmp_path, title, text):
    with pytest.raises(InvalidInputError):
        pipeline.score_resume(tmp_path / "missing.pdf", title, text)


def test_score_texts_rejects_blank_job_description():
    with pytest.raises(InvalidInputError):
        pipeline.score_texts("Python developer", "   ")


def test_extractor_errors_propagate(tmp_path):
    with pytest.raises(ResumeNotFoundError):
        pipeline.score_resume(tmp_path / "missing.txt", "Engineer", JOB_TEXT)
    with pytest.raises(UnsupportedFormatError):
        pipeline.score_resume(tmp_path / "resume.doc", "Engineer", JOB_TEXT)


def test_empty_resume_scores_zero(make_text_file):
    path = make_text_file("")

    result = pipeline.score_resume(path, "Engineer", JOB_TEXT)

    assert result.score == 0.0
    assert result.top_overlap == ()
    assert result.resume_preview == ""


def test_preview_is_truncated(make_text_file):
    path = make_text_file("python " * 200)

    default = pipeline.score_resume(path, "Engineer", JOB_TEXT)
    short = pipeline.score_resume(
        path, "Engineer", JOB_TEXT, settings=MatchSettings(preview_length=20)
    )

    assert len(default.resume_preview) == 500
    assert short.resume_preview == ("python " * 200)[:20]


def test_settings_control_tokenisation():
    with_stop_words = pipeline.score_texts("the and of python", "the and of java")
    without_stop_words = pipeline.score_texts(
        "the and of python", "the and of java", settings=MatchSettings(use_stop_words=False)
    )

    assert with_stop_words.score == 0.0
    assert without_stop_words.score > 0.0
    assert {entry.term for entry in without_stop_words.top_overlap} == {"the", "and", "of"}


def test_result_to_dict_shape():
    result = pipeline.score_texts("Python developer", "Python engineer")

    payload = pipeline.result_to_dict(result)

    assert set(payload) == {"score", "topOverlap", "resumePreview"}
    assert payload["score"] == result.score
    assert payload["topOverlap"] == [
        {"term": "python", "resumeTfIdf": 0.5, "jdTfIdf": 0.5},
    ]
    assert payload["resumePreview"] == "Python developer"


def test_format_result_uses_display_precision():
    result = pipeline.score_texts("Python developer", "Python engineer")

    lines = pipeline.format_result(result)

    assert lines[0] == f"Score: {result.score:.4f}"
    assert lines[1] == "python   (r=0.500, jd=0.500)"


def test_score_is_logged(make_text_file, caplog):
    path = make_text_file("Python developer")
    caplog.set_level(logging.INFO, logger="smart_screener")

    pipeline.score_resume(path, "Engineer", JOB_TEXT)

    assert any("Scored" in record.getMessage() for record in caplog.records)


def test_load_job_description(tmp_path):
    path = tmp_path / "job.txt"
    path.write_text(JOB_TEXT, encoding="utf-8")

    assert pipeline.load_job_description(path) == JOB_TEXT
    with pytest.raises(FileNotFoundError):
        pipeline.load_job_description(tmp_path / "missing.txt")


def test_preview_never_exceeds_configured_length():
    text = "python developer " * 100

    empty = pipeline.score_texts(text, "python", settings=MatchSettings(preview_length=0))

    assert empty.resume_preview == ""
    with pytest.raises(ValueError):
        pipeline.score_texts(text, "python", settings=MatchSettings(preview_length=-1))


def test_score_resume_matches_score_texts(make_text_file):
    text = "Python developer with strong SQL skills"
    path = make_text_file(text)

    from_file = pipeline.score_resume(path, "Backend Developer", JOB_TEXT)
    from_text = pipeline.score_texts(text, JOB_TEXT, job_title="Backend Developer")

    assert from_file == from_text
