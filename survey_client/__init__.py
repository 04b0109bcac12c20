from survey_client.api_client import SurveyClient, SurveyClientError
from survey_client.submission import (
    Demographic,
    Financial,
    Health,
    SurveyMeta,
    SurveySubmission,
    build_submission,
    decode_answer,
    toggle_value,
)
from survey_client.viewer import render_row, render_rows
