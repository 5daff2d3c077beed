from __future__ import annotations
from dataclasses import asdict
from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel
import logging, os, uuid, typing as t

from mindset_core.engine import QuizSession, calculate_test_results
from mindset_core.types import Answer, Question
from mindset_core.question_bank import load_questions
from mindset_core.validators import completeness_issues
from mindset_core.config import EXPORT_ENABLED
from mindset_core.report_html import render_report_html
from mindset_core.reporting import render_text
from mindset_core.results_export import result_row, to_csv as export_to_csv, to_json as export_to_json
from .storage import (
    active_sessions_for_user,
    clear_active_session,
    delete_report,
    find_report_by_session,
    iter_reports,
    list_reports_for_user,
    load_all_active_sessions,
    load_report,
    record_active_session,
    save_report,
    update_active_session,
    utcnow_iso,
)

log = logging.getLogger(__name__)

SESS: dict[str, QuizSession] = {}
SESSION_INFO: dict[str, dict[str, t.Any]] = {}


def _restore_sessions() -> None:
    for sid, payload in load_all_active_sessions().items():
        sess = QuizSession()
        for qid, val in (payload.get("answers") or {}).items():
            sess.answers[qid] = val
        SESS[sid] = sess
        SESSION_INFO[sid] = {"user_id": payload.get("userId"), "started_at": payload.get("startedAt")}
    if SESS:
        log.info("restored %d active session(s)", len(SESS))


_restore_sessions()

app = FastAPI(title="Outcome Mindset API")


@app.get("/")
def root():
    return {"status": "ok", "service": "outcome-mindset-api"}


ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class AnswerIn(BaseModel):
    question_id: str
    value: t.Any = None

class ScoreReq(BaseModel):
    answers: list[AnswerIn]
    check_complete: bool = False

class StartReq(BaseModel):
    user_id: str | None = None

# ---- Helpers ----
def _serialize_question(q: Question | None) -> dict[str, t.Any] | None:
    if q is None: return None
    return asdict(q)


def _session_or_404(sid: str) -> QuizSession:
    sess = SESS.get(sid)
    if not sess: raise HTTPException(404, "session not found")
    return sess


def _report_or_404(report_id: str) -> dict[str, t.Any]:
    report = load_report(report_id)
    if not report: raise HTTPException(404, "report not found")
    return report


def _decorate_report(base: dict[str, t.Any], *, session_id: str, user_id: str | None) -> dict[str, t.Any]:
    rid = str(uuid.uuid4())
    created = utcnow_iso()
    report = dict(base)
    report["meta"] = {"sessionId": session_id, "userId": user_id, "createdAt": created, "reportId": rid}
    report["id"] = rid
    report["reportId"] = rid
    report["created_at"] = created
    return report


def _progress_payload(sess: QuizSession) -> dict[str, t.Any]:
    q = sess.next_question()
    return {"done": q is None, "question": _serialize_question(q), "progress": round(sess.progress(), 1)}

# ---- Health / catalog ----
@app.get("/health")
def health():
    return {"status": "ok", "questions": len(load_questions()), "export_enabled": EXPORT_ENABLED}


@app.get("/questions")
def questions():
    return {"questions": [asdict(q) for q in load_questions()]}

# ---- Stateless scoring ----
@app.post("/api/score")
def score(req: ScoreReq):
    answers = [Answer(question_id=a.question_id, value=a.value) for a in req.answers]
    if req.check_complete:
        issues = completeness_issues(answers)
        if issues:
            raise HTTPException(422, {"issues": issues})
    return calculate_test_results(answers).to_dict()

# ---- Sessions ----
@app.post("/session/start")
def start(req: StartReq):
    sid = str(uuid.uuid4())
    sess = QuizSession()
    SESS[sid] = sess
    started_at = utcnow_iso()
    SESSION_INFO[sid] = {"user_id": req.user_id, "started_at": started_at}
    record_active_session(sid, {
        "sessionId": sid,
        "userId": req.user_id,
        "startedAt": started_at,
        "lastUpdated": started_at,
        "answers": {},
    })
    return {"session_id": sid, **_progress_payload(sess)}


@app.get("/session/{sid}/next")
def next_question(sid: str):
    return _progress_payload(_session_or_404(sid))


@app.post("/session/{sid}/answer")
def answer(sid: str, req: AnswerIn):
    sess = _session_or_404(sid)
    sess.answer(Answer(question_id=req.question_id, value=req.value))
    update_active_session(sid, {"lastUpdated": utcnow_iso(), "answers": dict(sess.answers)})
    return _progress_payload(sess)


@app.post("/session/{sid}/back")
def back(sid: str):
    sess = _session_or_404(sid)
    q = sess.back()
    return {"question": _serialize_question(q), "progress": round(sess.progress(), 1)}


@app.post("/session/{sid}/finish")
def finish(sid: str, strict: bool = Query(False, description="Reject incomplete answer sets")):
    sess = _session_or_404(sid)
    if strict:
        issues = completeness_issues(sess.answer_list(), sess.questions)
        if issues:
            raise HTTPException(422, {"issues": issues})
    info = SESSION_INFO.get(sid, {})
    report = _decorate_report(sess.finalize().to_dict(), session_id=sid, user_id=info.get("user_id"))
    metadata = {
        "sessionId": sid,
        "userId": info.get("user_id"),
        "createdAt": report["created_at"],
        "overall_score": report["overall_score"],
        "archetype": report["archetype"],
    }
    save_report(report["id"], report, metadata)
    clear_active_session(sid)
    SESS.pop(sid, None)
    SESSION_INFO.pop(sid, None)
    return report


@app.get("/session/{sid}/report")
def session_report(sid: str):
    stored = find_report_by_session(sid)
    if stored:
        return stored
    return _session_or_404(sid).finalize().to_dict()

# ---- Reports ----
@app.get("/reports/{report_id}")
def get_report(report_id: str):
    return _report_or_404(report_id)


@app.get("/reports/{report_id}/html", response_class=HTMLResponse)
def get_report_html(report_id: str):
    return HTMLResponse(render_report_html(_report_or_404(report_id)))


@app.get("/reports/{report_id}/text", response_class=PlainTextResponse)
def get_report_text(report_id: str):
    body = render_text(_report_or_404(report_id))
    return PlainTextResponse(
        body,
        headers={"Content-Disposition": f"attachment; filename=\"outcome-mindset-{report_id}.txt\""},
    )


@app.delete("/reports/{report_id}")
def delete_report_endpoint(report_id: str):
    if not delete_report(report_id):
        raise HTTPException(404, "report not found")
    return {"ok": True}


@app.get("/users/{user_id}/reports")
def list_reports(user_id: str):
    return {"reports": list_reports_for_user(user_id)}


@app.get("/users/{user_id}/sessions/active")
def list_active_sessions(user_id: str):
    return {"sessions": active_sessions_for_user(user_id)}

# ---- Result log export ----
def _export_rows() -> list[dict[str, t.Any]]:
    if not EXPORT_ENABLED:
        raise HTTPException(404, "export disabled")
    return [
        result_row(report, session_id=meta.get("sessionId") or "", created_at=meta.get("createdAt") or "")
        for _rid, meta, report in iter_reports()
    ]


@app.get("/results/export.json")
def export_json():
    return export_to_json(_export_rows())


@app.get("/results/export.csv")
def export_csv():
    return Response(
        content=export_to_csv(_export_rows()),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=\"results.csv\""},
    )
