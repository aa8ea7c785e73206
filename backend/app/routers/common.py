from fastapi import Response

from app.schemas.pages import SubmissionView, SubmitState

_FAILURE_STATUS = {
    "auth_required": 401,
    "busy": 409,
    "write_error": 400,
}


def set_submission_status(response: Response, view: SubmissionView, success_status: int = 200):
    if view.state == SubmitState.SUCCESS:
        response.status_code = success_status
    elif view.state == SubmitState.INVALID:
        response.status_code = 422
    else:
        response.status_code = _FAILURE_STATUS.get(view.error_code, 400)
