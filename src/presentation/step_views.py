"""Streamlit views for the assessment steps and the results page."""
import logging
from typing import Any, Dict, Optional

import streamlit as st

from src.application import intake
from src.application.conversation import InquiryConversation, InquirySummarizer
from src.application.modality import (
    FaceAnalyzer,
    ListeningAnalyzer,
    ModalityAnalyzer,
    ReportExtractor,
    TongueAnalyzer,
)
from src.application.pulse import MEASUREMENT_SECONDS, PulseMeasurement, PulseSelector, set_bpm
from src.application.submission import ReportSubmitter
from src.application.use_cases import AnalysisUseCase, ReportGenerationUseCase
from src.application.wizard import StepContext
from src.domain.catalogs import (
    DEFAULT_DOCTOR_LEVEL_ID,
    DOCTOR_LEVELS,
    DURATION_OPTIONS,
    HEALTH_SERVICES,
    PULSE_TYPES,
    SYMPTOM_CATEGORIES,
    SYNC_DATA_TYPES,
    WEARABLE_DEVICES,
    available_for,
    default_sync_permissions,
)
from src.domain.errors import AnalysisError, CaptureError, FormDataError, StepBusyError
from src.domain.i18n import Language, TranslationKey as K
from src.domain.models import Gender
from src.domain.rules import bmi_category, bpm_category, calculate_bmi, is_profile_complete
from src.domain.steps import StepId
from src.presentation.session import commit, producer_for, services, step_state, t, user_id, wizard


logger = logging.getLogger(__name__)

_GENDER_KEYS = {Gender.MALE: K.GENDER_MALE, Gender.FEMALE: K.GENDER_FEMALE, Gender.OTHER: K.GENDER_OTHER}


def _key(name: str) -> str:
    # Widget keys change on remount so widgets start from the form values again
    return f"{name}_{wizard().mount_key}"


def _seeded(name: str, value: Any) -> str:
    """Widget key whose state starts from ``value``; later writes go through session state."""
    key = _key(name)
    if key not in st.session_state:
        st.session_state[key] = value
    return key


def _choose_concern(symptom: str) -> None:
    commit(intake.choose_main_concern(wizard().form_data, symptom))
    st.session_state[_key("main_concern")] = wizard().form_data.main_concern


def _apply(ctx: StepContext, patch: Dict[str, Any]) -> None:
    try:
        ctx.on_update(patch)
    except FormDataError as e:
        st.error(str(e))


def render_basic_info(ctx: StepContext) -> None:
    data = ctx.data
    st.subheader(t(K.STEP_BASIC_INFO))
    name = st.text_input(t(K.FIELD_NAME), value=data.name, key=_key("name"))
    col1, col2 = st.columns(2)
    with col1:
        age = st.text_input(t(K.FIELD_AGE), value=data.age, key=_key("age"))
    with col2:
        genders = [None] + list(Gender)
        gender = st.selectbox(
            t(K.FIELD_GENDER),
            genders,
            index=genders.index(data.gender),
            format_func=lambda g: "" if g is None else t(_GENDER_KEYS[g]),
            key=_key("gender"),
        )
    col3, col4 = st.columns(2)
    with col3:
        height = st.text_input(t(K.FIELD_HEIGHT), value=data.height, key=_key("height"))
    with col4:
        weight = st.text_input(t(K.FIELD_WEIGHT), value=data.weight, key=_key("weight"))

    patch = {
        field: value
        for field, value in (("name", name), ("age", age), ("gender", gender), ("height", height), ("weight", weight))
        if value != getattr(data, field)
    }
    if patch:
        try:
            commit(intake.update_profile(data, **patch))
        except FormDataError:
            st.error(t(K.INVALID_NUMBER))

    bmi = calculate_bmi(wizard().form_data.height, wizard().form_data.weight)
    if bmi is not None:
        st.metric(t(K.BMI_LABEL), bmi, bmi_category(bmi, wizard().language), delta_color="off")


def render_profile_summary(ctx: StepContext) -> None:
    account = st.session_state.get("user_data") or {}
    if not step_state("profile_applied", lambda: False):
        st.session_state.step_state["profile_applied"] = True
        prefilled = intake.apply_profile(ctx.data, account)
        if prefilled is not ctx.data:
            commit(prefilled)
            st.rerun()

    data = ctx.data
    st.subheader(t(K.STEP_PROFILE_SUMMARY))
    rows = [
        (t(K.FIELD_NAME), data.name),
        (t(K.FIELD_AGE), data.age),
        (t(K.FIELD_GENDER), t(_GENDER_KEYS[data.gender]) if data.gender else ""),
        (t(K.FIELD_HEIGHT), data.height),
        (t(K.FIELD_WEIGHT), data.weight),
    ]
    for label, value in rows:
        st.markdown(f"**{label}:** {value or '—'}")
    bmi = calculate_bmi(data.height, data.weight)
    if bmi is not None:
        st.markdown(f"**{t(K.BMI_LABEL)}:** {bmi} ({bmi_category(bmi, wizard().language)})")

    complete = is_profile_complete(data)
    if not complete:
        st.warning(t(K.PROFILE_INCOMPLETE))
    col1, col2 = st.columns(2)
    with col1:
        if st.button(t(K.EDIT), use_container_width=True):
            ctx.on_back()
            st.rerun()
    with col2:
        if st.button(t(K.CONTINUE), disabled=not complete, use_container_width=True, type="primary"):
            if account.get("email"):
                ok, message = services().users.update_profile(
                    account["email"],
                    age=data.age,
                    gender=data.gender.value if data.gender else "",
                    height=data.height,
                    weight=data.weight,
                )
                if not ok:
                    logger.warning("Profile not saved: %s", message)
            ctx.on_next()
            st.rerun()


def render_symptoms(ctx: StepContext) -> None:
    data = ctx.data
    st.subheader(t(K.STEP_SYMPTOMS))
    main_concern = st.text_input(t(K.MAIN_CONCERN), key=_seeded("main_concern", data.main_concern))
    if main_concern != data.main_concern:
        _apply(ctx, {"main_concern": main_concern})

    view = st.radio(t(K.SYMPTOM_VIEW), list(SYMPTOM_CATEGORIES), horizontal=True, key=_key("symptom_view"))
    for category, symptoms in SYMPTOM_CATEGORIES[view].items():
        st.caption(category)
        cols = st.columns(4)
        for i, symptom in enumerate(symptoms):
            selected = symptom == wizard().form_data.main_concern
            cols[i % 4].button(
                ("✓ " if selected else "") + symptom,
                key=_key(f"chip_{view}_{category}_{symptom}"),
                on_click=_choose_concern,
                args=(symptom,),
            )

    catalog = sorted({s for groups in SYMPTOM_CATEGORIES.values() for items in groups.values() for s in items})
    options = catalog + [s for s in data.symptoms if s not in catalog]
    others = st.multiselect(t(K.OTHER_SYMPTOMS), options, default=data.symptoms, key=_key("symptoms"))
    if others != data.symptoms:
        _apply(ctx, {"symptoms": others})

    details = st.text_area(t(K.SYMPTOM_DETAILS), value=data.symptom_details, key=_key("details"))
    if details != data.symptom_details:
        _apply(ctx, {"symptom_details": details})

    durations = [None] + [d for d, _ in DURATION_OPTIONS]
    labels = dict(DURATION_OPTIONS)
    duration = st.radio(
        t(K.DURATION),
        durations,
        index=durations.index(data.symptom_duration),
        format_func=lambda d: "—" if d is None else labels[d],
        horizontal=True,
        key=_key("duration"),
    )
    if duration != data.symptom_duration:
        commit(intake.set_symptom_duration(wizard().form_data, duration))


def render_upload_reports(ctx: StepContext) -> None:
    extractor: ReportExtractor = step_state(
        "report_extractor", lambda: ReportExtractor(services().provider, wizard().language)
    )
    st.subheader(t(K.STEP_UPLOAD_REPORTS))
    upload = st.file_uploader(t(K.UPLOAD_REPORT), type=["png", "jpg", "jpeg"], key=_key("report_upload"))
    if st.button(t(K.ANALYZE), disabled=upload is None or extractor.busy):
        with st.spinner(t(K.ANALYZING)):
            try:
                commit(extractor.capture_and_analyze(producer_for(upload, "report"), wizard().form_data))
            except StepBusyError:
                logger.info("Report extraction already running")
        st.rerun()

    if extractor.failure is not None:
        st.error(extractor.error_message)
        col1, col2 = st.columns(2)
        if col1.button(t(K.RETRY), disabled=extractor.media is None):
            commit(extractor.retry(wizard().form_data))
            st.rerun()
        if col2.button(t(K.ADD_WITHOUT_TEXT), disabled=extractor.media is None):
            commit(extractor.add_without_text(wizard().form_data))
            st.rerun()

    for uploaded in ctx.data.files:
        with st.expander(uploaded.name, expanded=False):
            text = st.text_area(t(K.EXTRACTED_TEXT), value=uploaded.extracted_text, key=_key(f"text_{uploaded.id}"))
            if text != uploaded.extracted_text:
                commit(ReportExtractor.update_text(wizard().form_data, uploaded.id, text))
            if st.button(t(K.REMOVE), key=_key(f"remove_{uploaded.id}")):
                commit(ReportExtractor.remove(wizard().form_data, uploaded.id))
                st.rerun()


def render_upload_medicine(ctx: StepContext) -> None:
    st.subheader(t(K.STEP_UPLOAD_MEDICINE))
    with st.form(_key("medicine_form"), clear_on_submit=True):
        name = st.text_input(t(K.MEDICINE_NAME))
        if st.form_submit_button(t(K.ADD)):
            commit(intake.add_text_medicine(wizard().form_data, name))
            st.rerun()

    photo = st.file_uploader(t(K.MEDICINE_PHOTO), type=["png", "jpg", "jpeg"], key=_key("medicine_photo"))
    if photo is not None and st.button(t(K.ADD), key=_key("add_photo")):
        try:
            media = producer_for(photo, "medicine")()
        except CaptureError as e:
            st.error(t(K.CAPTURE_FAILED))
            logger.warning("Medicine photo not stored: %s", e)
        else:
            commit(intake.add_image_medicine(wizard().form_data, media))
            st.rerun()

    for medicine in ctx.data.medicines:
        col1, col2 = st.columns([4, 1])
        with col1:
            if medicine.uri and medicine.type.value == "image":
                st.image(medicine.uri, caption=medicine.name, width=160)
            else:
                st.markdown(f"💊 {medicine.name}")
        if col2.button(t(K.REMOVE), key=_key(f"remove_med_{medicine.id}")):
            commit(intake.remove_medicine(wizard().form_data, medicine.id))
            st.rerun()


def render_select_doctor(ctx: StepContext) -> None:
    st.subheader(t(K.CHOOSE_DOCTOR))
    ids = [level.id for level in DOCTOR_LEVELS]
    current = ctx.data.doctor.doctor_level.id if ctx.data.doctor else DEFAULT_DOCTOR_LEVEL_ID
    zh = wizard().language == Language.ZH
    choice = st.radio(
        t(K.CHOOSE_DOCTOR),
        ids,
        index=ids.index(current),
        format_func=lambda i: next(
            f"{lvl.name_zh if zh else lvl.name} · {lvl.description}" for lvl in DOCTOR_LEVELS if lvl.id == i
        ),
        label_visibility="collapsed",
        key=_key("doctor"),
    )
    if st.button(t(K.CONFIRM), type="primary", use_container_width=True):
        ctx.on_next({"doctor": intake.doctor_selection(choice)})
        st.rerun()


def render_inquiry(ctx: StepContext) -> None:
    conversation: InquiryConversation = step_state(
        "inquiry", lambda: InquiryConversation(services().provider, wizard().language)
    )
    st.subheader(t(K.STEP_INQUIRY))
    if not conversation.started:
        with st.spinner(t(K.ANALYZING)):
            commit(conversation.start(wizard().form_data))
        st.rerun()

    for message in conversation.display_messages:
        with st.chat_message(message.role.value):
            st.markdown(message.content)

    chosen: Optional[str] = None
    if conversation.options:
        cols = st.columns(len(conversation.options))
        for i, option in enumerate(conversation.options):
            if cols[i].button(option, key=_key(f"option_{len(conversation.display_messages)}_{i}")):
                chosen = option
    typed = st.chat_input(t(K.TYPE_MESSAGE), disabled=conversation.pending)
    text = chosen or typed
    if text:
        with st.spinner(t(K.ANALYZING)):
            commit(conversation.send(text, wizard().form_data))
        st.rerun()


def render_inquiry_summary(ctx: StepContext) -> None:
    summarizer: InquirySummarizer = step_state(
        "summarizer", lambda: InquirySummarizer(services().provider, wizard().language)
    )
    attempt = step_state("summary_attempt", lambda: {"tried": False, "error": None})
    st.subheader(t(K.STEP_INQUIRY_SUMMARY))

    if summarizer.needs_summary(ctx.data) and not attempt["tried"]:
        attempt["tried"] = True
        with st.spinner(t(K.SUMMARY_GENERATING)):
            try:
                commit(summarizer.generate(wizard().form_data))
                attempt["error"] = None
            except AnalysisError as e:
                attempt["error"] = str(e)
        st.rerun()

    if attempt["error"]:
        st.error(attempt["error"])
        if st.button(t(K.RETRY)):
            attempt["tried"] = False
            st.rerun()
        return

    if summarizer.elapsed is not None:
        st.caption(t(K.SUMMARY_ELAPSED, seconds=f"{summarizer.elapsed:.1f}"))
    text = st.text_area(t(K.STEP_INQUIRY_SUMMARY), value=ctx.data.inquiry_summary, height=320, key=_key("summary"))
    if st.button(t(K.CONFIRM), type="primary", use_container_width=True):
        ctx.on_next({"inquiry_summary": InquirySummarizer.confirm(wizard().form_data, text).inquiry_summary})
        st.rerun()


def _render_analysis_result(analyzer: ModalityAnalyzer) -> None:
    result = analyzer.result
    if result is None:
        return
    data = result.model_dump(exclude_none=True)
    observation = data.get("observation") or data.get("overall_observation")
    if observation:
        st.markdown(f"**{t(K.OBSERVATION)}:** {observation}")
    patterns = data.get("potential_issues") or data.get("pattern_suggestions") or []
    if patterns:
        st.markdown(f"**{t(K.PATTERNS)}:**")
        for pattern in patterns:
            st.markdown(f"- {pattern}")
    if data.get("confidence") not in (None, ""):
        st.caption(f"{t(K.CONFIDENCE)}: {data['confidence']}")


def _render_capture(ctx: StepContext, analyzer: ModalityAnalyzer, upload, default_mime: str) -> None:
    if analyzer.state.value == "done":
        _render_analysis_result(analyzer)
        if st.button(t(K.RETAKE), key=_key(f"retake_{analyzer.kind}")):
            analyzer.reset()
            st.rerun()
        return

    if st.button(t(K.ANALYZE), disabled=upload is None or analyzer.busy, type="primary", key=_key(f"analyze_{analyzer.kind}")):
        with st.spinner(t(K.ANALYZING)):
            try:
                commit(analyzer.capture_and_analyze(producer_for(upload, analyzer.kind, default_mime), wizard().form_data))
            except StepBusyError:
                logger.info("%s analysis already running", analyzer.kind)
        st.rerun()

    if analyzer.failure is not None:
        st.error(analyzer.error_message)
        observation = getattr(analyzer.failure, "observation", "")
        if observation:
            st.caption(observation)
        col1, col2 = st.columns(2)
        if col1.button(t(K.RETRY), disabled=analyzer.media is None, key=_key(f"retry_{analyzer.kind}")):
            commit(analyzer.retry(wizard().form_data))
            st.rerun()
        if col2.button(t(K.RETAKE), key=_key(f"reset_{analyzer.kind}")):
            analyzer.reset()
            st.rerun()


def _render_photo_step(ctx: StepContext, title: K, analyzer: ModalityAnalyzer, existing: Optional[str]) -> None:
    st.subheader(t(title))
    if existing and analyzer.state.value == "idle":
        st.image(existing, width=240)
    upload = st.camera_input(t(K.TAKE_PHOTO), key=_key(f"camera_{analyzer.kind}"))
    if upload is None:
        upload = st.file_uploader(t(K.OR_UPLOAD), type=["png", "jpg", "jpeg"], key=_key(f"file_{analyzer.kind}"))
    _render_capture(ctx, analyzer, upload, "image/jpeg")


def render_tongue(ctx: StepContext) -> None:
    analyzer = step_state("tongue", lambda: TongueAnalyzer(services().provider, wizard().language))
    _render_photo_step(ctx, K.STEP_TONGUE, analyzer, ctx.data.tongue_image)


def render_face(ctx: StepContext) -> None:
    analyzer = step_state("face", lambda: FaceAnalyzer(services().provider, wizard().language))
    _render_photo_step(ctx, K.STEP_FACE, analyzer, ctx.data.face_image)


def render_audio(ctx: StepContext) -> None:
    analyzer = step_state("audio", lambda: ListeningAnalyzer(services().provider, wizard().language))
    st.subheader(t(K.STEP_AUDIO))
    upload = st.audio_input(t(K.RECORD_VOICE), key=_key("audio"))
    _render_capture(ctx, analyzer, upload, "audio/wav")
    label = t(K.CONTINUE) if ctx.data.audio_analysis else t(K.SKIP)
    if st.button(label, use_container_width=True, disabled=analyzer.busy, key=_key("audio_next")):
        ctx.on_next()
        st.rerun()


def render_pulse(ctx: StepContext) -> None:
    selector: PulseSelector = step_state("pulse_selector", lambda: PulseSelector(wizard().language))
    measured: Dict[str, str] = step_state("pulse_result", dict)
    measurement: PulseMeasurement = step_state(
        "pulse_measurement", lambda: PulseMeasurement(on_complete=lambda bpm: measured.update(bpm=bpm))
    )
    st.subheader(t(K.STEP_PULSE))

    bpm_key = _seeded("bpm", ctx.data.bpm)
    if measured.get("bpm"):
        # Counted by the timer thread since the last run
        commit(set_bpm(wizard().form_data, measured.pop("bpm")))
        st.session_state[bpm_key] = wizard().form_data.bpm

    bpm = st.text_input(t(K.BPM_INPUT), max_chars=3, key=bpm_key)
    if bpm != wizard().form_data.bpm:
        commit(set_bpm(wizard().form_data, bpm))
    category = bpm_category(wizard().form_data.bpm, wizard().language)
    if category:
        st.caption(category)

    if measurement.running:
        st.info(t(K.COUNTING, seconds=str(MEASUREMENT_SECONDS)))
        col1, col2 = st.columns([3, 1])
        if col1.button(f"💓 {t(K.TAP_BEAT)} ({measurement.beats})", use_container_width=True, key=_key("tap")):
            measurement.tap()
            st.rerun()
        if col2.button(t(K.CANCEL), key=_key("cancel_count")):
            measurement.cancel()
            st.rerun()
    elif st.button(t(K.START_COUNT, seconds=str(MEASUREMENT_SECONDS)), key=_key("start_count")):
        measurement.start()
        st.rerun()

    st.markdown(f"**{t(K.PULSE_QUALITIES)}**")
    selected = selector.selected_ids(ctx.data)
    cols = st.columns(3)
    for i, pulse in enumerate(PULSE_TYPES):
        label = f"{'✓ ' if pulse.id in selected else ''}{pulse.name_zh} {pulse.name_en}"
        if cols[i % 3].button(label, help=pulse.description, use_container_width=True, key=_key(f"pulse_{pulse.id}")):
            commit(selector.toggle(wizard().form_data, pulse.id))
            st.rerun()
    if selector.warning:
        st.warning(selector.warning)


def render_smart_connect(ctx: StepContext) -> None:
    permissions: Dict[str, bool] = step_state("sync_permissions", default_sync_permissions)
    st.subheader(t(K.STEP_SMART_CONNECT))
    connected = ctx.data.smart_connect_data

    platform = st.radio(t(K.PLATFORM), ["ios", "android"], horizontal=True, key=_key("platform"))
    st.markdown(f"**{t(K.DATA_PERMISSIONS)}**")
    cols = st.columns(3)
    for i, data_type in enumerate(SYNC_DATA_TYPES):
        permissions[data_type.id] = cols[i % 3].checkbox(
            data_type.label, value=permissions[data_type.id], key=_key(f"perm_{data_type.id}")
        )

    for service in available_for(platform, HEALTH_SERVICES):
        is_connected = connected is not None and connected.service == service.id
        label = f"✓ {service.name}" if is_connected else f"{t(K.CONNECT)} {service.name}"
        if st.button(label, disabled=is_connected, key=_key(f"service_{service.id}")):
            commit(intake.connect_health_service(wizard().form_data, service.id, permissions))
            st.rerun()

    st.markdown(f"**{t(K.DEVICES)}**")
    cols = st.columns(3)
    for i, device in enumerate(available_for(platform, WEARABLE_DEVICES)):
        selected = connected is not None and connected.device == device.id
        if cols[i % 3].button(("✓ " if selected else "") + device.name, key=_key(f"device_{device.id}")):
            commit(intake.connect_device(wizard().form_data, device.id))
            st.rerun()

    if connected is not None:
        for data_id, value in connected.synced_data.items():
            label = next((d.label for d in SYNC_DATA_TYPES if d.id == data_id), data_id)
            st.markdown(f"- {label}: **{value}**")
        confirm_key = _key("confirm_disconnect")
        if st.session_state.get(confirm_key):
            st.warning(t(K.DISCONNECT_CONFIRM))
            col1, col2 = st.columns(2)
            if col1.button(t(K.DISCONNECT), key=_key("disconnect_yes")):
                st.session_state[confirm_key] = False
                commit(intake.disconnect_health_service(wizard().form_data))
                st.rerun()
            if col2.button(t(K.CANCEL), key=_key("disconnect_no")):
                st.session_state[confirm_key] = False
                st.rerun()
        elif st.button(t(K.DISCONNECT), key=_key("disconnect")):
            st.session_state[confirm_key] = True
            st.rerun()


def render_analysis(ctx: StepContext) -> None:
    outcome = step_state("analysis", lambda: {"started": False, "result": None, "error": None})
    st.subheader(t(K.STEP_ANALYSIS))

    if not outcome["started"]:
        outcome["started"] = True
        use_case = AnalysisUseCase(
            ReportGenerationUseCase(services().provider, wizard().language),
            ReportSubmitter(services().store),
        )
        with st.spinner(t(K.ANALYZING)):
            try:
                form, result = use_case.run(wizard().form_data, user_id())
            except AnalysisError as e:
                outcome["error"] = str(e)
            else:
                commit(form)
                outcome["result"] = result
                outcome["error"] = None
        st.rerun()

    if outcome["error"]:
        st.error(t(K.ANALYSIS_FAILED))
        st.caption(outcome["error"])
        if st.button(t(K.RETRY), type="primary"):
            outcome["started"] = False
            st.rerun()
        return

    result = outcome["result"]
    if result is None:
        return
    if result.saved or result.guest:
        if result.guest:
            st.session_state.guest_notice = True
        ctx.on_next()
        st.rerun()
        return

    st.warning(f"**{t(K.CONNECTION_ISSUE)}**\n\n{t(K.SAVE_FAILED)}")
    col1, col2 = st.columns(2)
    if col1.button(t(K.VIEW_RESULTS), type="primary", use_container_width=True):
        ctx.on_next()
        st.rerun()
    if col2.button(t(K.RETRY), disabled=not result.can_retry, use_container_width=True):
        outcome["started"] = False
        st.rerun()


def _render_section(title: str, section: Any) -> None:
    if not section:
        return
    st.markdown(f"### {title}")
    if isinstance(section, dict):
        for key, value in section.items():
            label = key.replace("_", " ").capitalize()
            if isinstance(value, list):
                st.markdown(f"**{label}:**")
                for item in value:
                    st.markdown(f"- {item.get('name', item) if isinstance(item, dict) else item}")
            elif isinstance(value, dict):
                _render_section(label, value)
            elif value:
                st.markdown(f"**{label}:** {value}")
    else:
        st.markdown(str(section))


def render_results(ctx: StepContext) -> None:
    st.header(t(K.RESULTS_TITLE))
    if st.session_state.get("guest_notice"):
        st.info(t(K.GUEST_NOT_SAVED))
    report = ctx.data.report or {}
    diagnosis = report.get("diagnosis") or {}
    primary = diagnosis.get("primary_pattern") or diagnosis.get("type")
    if primary:
        st.success(f"**{t(K.PRIMARY_PATTERN)}:** {primary}")
    summary = (report.get("analysis") or {}).get("summary")
    if summary:
        st.markdown(summary.replace("\\n", "\n\n"))
    _render_section(t(K.CONSTITUTION), report.get("constitution"))
    _render_section(t(K.TREATMENT), report.get("treatment"))
    _render_section(t(K.RECOMMENDATIONS), report.get("recommendations"))
    if report.get("disclaimer"):
        st.caption(report["disclaimer"])


RENDERERS = {
    StepId.BASIC_INFO: render_basic_info,
    StepId.PROFILE_SUMMARY: render_profile_summary,
    StepId.SYMPTOMS: render_symptoms,
    StepId.UPLOAD_REPORTS: render_upload_reports,
    StepId.UPLOAD_MEDICINE: render_upload_medicine,
    StepId.SELECT_DOCTOR: render_select_doctor,
    StepId.INQUIRY: render_inquiry,
    StepId.INQUIRY_SUMMARY: render_inquiry_summary,
    StepId.TONGUE: render_tongue,
    StepId.FACE: render_face,
    StepId.AUDIO: render_audio,
    StepId.PULSE: render_pulse,
    StepId.SMART_CONNECT: render_smart_connect,
    StepId.ANALYSIS: render_analysis,
}
