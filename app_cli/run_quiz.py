from __future__ import annotations
import os, datetime
from typing import Any, List
from mindset_core.types import Answer, Question
from mindset_core.engine import QuizSession
from mindset_core.reporting import render_text, write_report
def _ask_int(prompt: str, lo: int, hi: int) -> int:
    while True:
        v = input(prompt).strip()
        if v.isdigit() and lo <= int(v) <= hi: return int(v)
        print(f"Enter a number from {lo} to {hi}.")
def _ask_ranking(q: Question) -> List[int]:
    opts = q.options or []
    ranks = [0] * len(opts)
    for prio in (1, 2, 3):
        free = [i for i, r in enumerate(ranks) if r == 0]
        for i in free: print(f"  [{i}] {opts[i]}")
        while True:
            idx = _ask_int(f"Option for priority {prio}: ", 0, len(opts) - 1)
            if idx in free: break
            print("That option is already ranked.")
        ranks[idx] = prio
    return ranks
def _ask_multi(q: Question) -> List[int]:
    opts = q.options or []
    for i, opt in enumerate(opts): print(f"  [{i}] {opt}")
    while True:
        raw = input("Your choices (indices, comma separated): ").replace(" ", "")
        parts = [p for p in raw.split(",") if p]
        if parts and all(p.isdigit() and int(p) < len(opts) for p in parts):
            return sorted({int(p) for p in parts})
        print("Enter one or more option indices.")
def ask(q: Question) -> Any:
    print(f"\n{q.title}\n{q.content}")
    if q.type == "likert":
        return _ask_int("(1-5) [1=strongly disagree, 5=strongly agree]: ", 1, 5)
    if q.type == "ranking":
        return _ask_ranking(q)
    if q.type == "multi-choice":
        return _ask_multi(q)
    opts = q.options or []
    for i, opt in enumerate(opts): print(f"  [{i}] {opt}")
    return _ask_int("Your choice (index): ", 0, len(opts) - 1)
def main():
    print("Outcome-Mindset Test")
    session = QuizSession()
    while True:
        q = session.next_question()
        if q is None: break
        session.answer(Answer(question_id=q.id, value=ask(q)))
    res = session.finalize(); os.makedirs("reports", exist_ok=True)
    print("\n" + render_text(res))
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = write_report(res, os.path.join("reports", f"report_{ts}.html"))
    print(f"Done. Report saved to: {path}")
if __name__ == "__main__": main()
