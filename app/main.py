from __future__ import annotations

import streamlit as st

from deck import Sentence, deck_to_frame, load_deck, load_sample_deck
from exceptions import DeckError
from log import get_logger
from session import PracticeSession

logger = get_logger("app")


def start_session(sentences: list[Sentence]) -> None:
    st.session_state["session"] = PracticeSession(sentences)
    st.session_state["reset_answer"] = True


def reset_session() -> None:
    st.session_state.pop("session", None)
    # a fresh key clears the previous upload
    st.session_state["upload_round"] = st.session_state.get("upload_round", 0) + 1
    st.session_state["reset_answer"] = True


def render_uploader() -> None:
    st.subheader("엑셀 파일 업로드")
    st.caption("순번 | 한글 | 영어 | 암기날짜 형식의 엑셀 파일을 업로드하세요")

    uploaded = st.file_uploader(
        "📂 파일 선택",
        type=["xlsx", "xls", "csv"],
        key=f"upload_{st.session_state.get('upload_round', 0)}",
    )
    if uploaded is not None:
        try:
            sentences = load_deck(uploaded, uploaded.name)
        except DeckError as exc:
            logger.warning("Rejected upload %s: %s", uploaded.name, exc)
            st.error(f"파일을 읽는 중 오류가 발생했습니다. ({exc})")
        else:
            start_session(sentences)
            st.toast(f"{len(sentences)}개의 문장을 불러왔습니다!")
            st.rerun()

    if st.button("샘플 문장으로 시작"):
        start_session(load_sample_deck())
        st.rerun()


def render_result(session: PracticeSession) -> None:
    result = session.result
    if result is None:
        return

    st.markdown("---")
    if result.is_correct:
        st.success(f"정답입니다! (유사도: {result.similarity}%)")
    else:
        st.error(f"틀렸습니다. (유사도: {result.similarity}%)")
    st.write(f"내 답변: {result.transcript}")
    st.write(f"정답: {session.current.english}")


def render_practice(session: PracticeSession) -> None:
    label = f"문제 {session.position} / {session.total}"
    if session.show_saved_only:
        label += " (저장된 표현)"

    col_label, col_saved, col_reset = st.columns([2, 1, 1])
    with col_label:
        st.write(label)
    with col_saved:
        if st.button(
            f"저장된 표현 ({len(session.saved)})",
            disabled=not session.saved,
        ):
            showing_saved = session.toggle_saved_view()
            st.session_state["reset_answer"] = True
            st.toast("저장된 표현만 보기" if showing_saved else "전체 문장 보기")
            st.rerun()
    with col_reset:
        if st.button("다시 시작"):
            reset_session()
            st.rerun()

    st.progress(int(session.progress_percent))

    current = session.current
    st.subheader("한글")
    st.write(current.korean)
    if current.memorized_on:
        st.caption(f"암기날짜: {current.memorized_on}")

    if st.session_state.get("reset_answer"):
        st.session_state["transcript"] = ""
        st.session_state["reset_answer"] = False

    transcript = st.text_area("영어로 말한 내용", key="transcript")

    col_grade, col_save, col_next = st.columns(3)
    with col_grade:
        if st.button("채점", disabled=not transcript.strip()):
            session.grade(transcript)
    with col_save:
        if st.button("표현 저장"):
            if session.save_current():
                st.toast("표현이 저장되었습니다!")
            else:
                st.toast("이미 저장된 표현입니다.")
    with col_next:
        if st.button("⏭ 다음 문장", disabled=session.is_last):
            session.next_sentence()
            st.session_state["reset_answer"] = True
            st.rerun()

    render_result(session)

    if session.is_last and session.result is not None:
        st.info("마지막 문장입니다. '다시 시작' 버튼을 눌러 처음부터 다시 연습하세요.")

    if session.saved:
        st.download_button(
            "저장된 표현 내려받기 (CSV)",
            deck_to_frame(session.saved).to_csv(index=False).encode("utf-8-sig"),
            file_name="saved_expressions.csv",
            mime="text/csv",
        )


st.set_page_config(page_title="영어 문장 암기 확인")

st.title("영어 문장 암기 확인")
st.caption("영어 문장을 말하고 즉시 채점받으세요")

practice = st.session_state.get("session")
if practice is None:
    render_uploader()
else:
    render_practice(practice)
