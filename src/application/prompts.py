from typing import List

from src.domain.i18n import Language
from src.domain.models import FormData
from src.domain.rules import calculate_bmi


TONGUE_ANALYSIS_PROMPT = (
    "You are an expert Traditional Chinese Medicine (TCM) practitioner specializing in tongue diagnosis (舌诊).\n\n"
    "Analyze this tongue image and provide a TCM-based assessment:\n"
    "1. Tongue Body Color (舌色): Pale, Pink, Red, Deep Red, Purple, Blue-ish\n"
    "2. Tongue Shape (舌形): Thin, Swollen, Teeth marks, Cracked, Stiff, Flaccid\n"
    "3. Tongue Coating (舌苔): Thin white, Thick white, Yellow, Gray/Black, Peeled/No coating\n"
    "4. Moisture (润燥): Moist, Dry, Slimy\n\n"
    "Based on these observations, provide a brief overall observation in plain language, "
    "2-3 possible TCM patterns and your confidence (0-100).\n\n"
    "Respond in JSON format:\n"
    "{\n"
    '  "observation": "Brief TCM assessment...",\n'
    '  "tongue_color": "color observed",\n'
    '  "tongue_shape": "shape characteristics",\n'
    '  "tongue_coating": "coating description",\n'
    '  "moisture": "moisture level",\n'
    '  "potential_issues": ["Pattern 1", "Pattern 2"],\n'
    '  "confidence": 85,\n'
    '  "is_valid_image": true\n'
    "}\n\n"
    "If the image is NOT a tongue, set is_valid_image to false and explain what you see instead."
)

FACE_ANALYSIS_PROMPT = (
    "You are an expert Traditional Chinese Medicine (TCM) practitioner specializing in facial diagnosis (望诊/面诊).\n\n"
    "Analyze this face image and provide a TCM-based assessment:\n"
    "1. Complexion (面色): Pale, Pink/Red, Yellow, Dark/Dull, Green-ish, Blue-ish\n"
    "2. Facial Zones: Forehead (heart), Nose (spleen), Cheeks (lungs), Chin (kidney)\n"
    "3. Skin Quality: Lustrous, Dry, Oily, Blemishes, Puffy\n"
    "4. Eyes: Bright, Dull, Redness, Puffiness, Dark circles\n"
    "5. Lips: Color, Dryness, Cracks\n\n"
    "Based on these observations, provide a brief overall observation in plain language, "
    "2-3 possible TCM patterns and your confidence (0-100).\n\n"
    "Respond in JSON format:\n"
    "{\n"
    '  "observation": "Brief TCM assessment...",\n'
    '  "complexion": "complexion description",\n'
    '  "facial_zones": "zone-specific observations",\n'
    '  "skin_quality": "skin characteristics",\n'
    '  "eyes": "eye observations",\n'
    '  "lips": "lip observations",\n'
    '  "potential_issues": ["Pattern 1", "Pattern 2"],\n'
    '  "confidence": 85,\n'
    '  "is_valid_image": true\n'
    "}\n\n"
    "If the image is NOT a face, set is_valid_image to false and explain what you see instead."
)

LISTENING_ANALYSIS_PROMPT = (
    "You are an expert TCM practitioner performing Wen Zhen (闻诊), the diagnostic method of listening.\n\n"
    "Analyze the recording in four categories: voice quality, breathing patterns, speech patterns "
    "and cough sounds. Rate the severity of each as normal, mild, moderate or significant, use TCM "
    "terminology and suggest the patterns the sounds may indicate.\n\n"
    "Return ONLY a JSON object:\n"
    "{\n"
    '  "overall_observation": "Summary of the auditory findings",\n'
    '  "voice_quality_analysis": {"observation": "", "severity": "normal", '
    '"tcm_indicators": [], "clinical_significance": ""},\n'
    '  "breathing_patterns": {"observation": "", "severity": "normal", '
    '"tcm_indicators": [], "clinical_significance": ""},\n'
    '  "speech_patterns": {"observation": "", "severity": "normal", '
    '"tcm_indicators": [], "clinical_significance": ""},\n'
    '  "cough_sounds": {"observation": "", "severity": "normal", '
    '"tcm_indicators": [], "clinical_significance": ""},\n'
    '  "pattern_suggestions": ["Pattern 1"],\n'
    '  "recommendations": ["Recommendation 1"],\n'
    '  "confidence": "low | moderate | high",\n'
    '  "notes": "Limitations of this recording",\n'
    '  "is_valid_audio": true\n'
    "}\n\n"
    "If the recording contains no usable human voice or breathing, set is_valid_audio to false."
)

MEDICAL_REPORT_PROMPT = (
    "You are a medical records assistant. Extract all readable text from this medical report image, "
    "keeping test names, values, units and reference ranges together.\n\n"
    'Respond in JSON format: {"text": "the extracted text"}'
)

CONSULTATION_PROMPT = (
    "You are an experienced Traditional Chinese Medicine doctor conducting the inquiry (问诊) "
    "of a diagnostic consultation. Ask one focused question at a time, following the Ten Questions "
    "(十问): cold and heat, perspiration, head and body, stool and urine, diet and appetite, chest, "
    "hearing, thirst, sleep and emotions. Be warm and concise, never claim certainty and never "
    "give a final diagnosis during the inquiry.\n"
)

SUMMARY_PROMPT = (
    "You are an expert TCM doctor assistant summarizing a patient inquiry session (问诊). "
    "Create a structured, clinical summary for the lead doctor with these sections:\n"
    "## 主诉 Chief Complaint\n"
    "## 症状详情 Symptom Details\n"
    "## 伴随症状 Associated Symptoms\n"
    "## 十问概要 Ten Questions Summary\n"
    "## 既往史 Medical History\n"
    "## 现用药物 Current Medications\n"
    "## 其他相关信息 Other Relevant Information\n\n"
    "Report findings without making a diagnosis. Omit sections with no information."
)

FINAL_ANALYSIS_PROMPT = (
    "You are a senior TCM physician. Integrate all four examinations (inspection, listening, "
    "inquiry, palpation) below into a pattern differentiation (辨证) and a care plan.\n\n"
    "Return a valid JSON object only, no markdown and no additional text:\n"
    "{\n"
    '  "diagnosis": {"primary_pattern": "", "secondary_patterns": [], "affected_organs": [], '
    '"pathomechanism": ""},\n'
    '  "constitution": {"type": "", "characteristics": "", "tendencies": ""},\n'
    '  "analysis": {"summary": "3-5 paragraph narrative in ONE string", '
    '"key_findings": {"from_inquiry": "", "from_visual": "", "from_pulse": "", "from_other": ""}, '
    '"pattern_rationale": ""},\n'
    '  "treatment": {"therapeutic_principle": "", "treatment_method": ""},\n'
    '  "recommendations": {"food_therapy": {"beneficial": [], "recipes": []}, "foods_to_avoid": [], '
    '"lifestyle": [], "acupoints": [], "exercise": [], "emotional_care": ""},\n'
    '  "precautions": {"warning_signs": [], "contraindications": []},\n'
    '  "disclaimer": "Standard disclaimer that TCM is complementary care"\n'
    "}"
)

STEERING_INSTRUCTION = (
    "(IMPORTANT: Respond with 2-3 sentences max asking a diagnosis question. "
    "Then provide 3-4 short potential answers for the patient in this format: "
    "<OPTIONS>Answer 1, Answer 2, Answer 3</OPTIONS>)"
)

REPAIR_INSTRUCTION = (
    "The JSON was invalid. Return ONLY valid JSON wrapped in {}. Start with { and end with }. No other text."
)

_LANGUAGE_NAMES = {
    Language.EN: "English",
    Language.ZH: "Chinese (Simplified)",
    Language.MS: "Malay",
}


def language_instruction(language: Language) -> str:
    return f"\n\nIMPORTANT: Use {_LANGUAGE_NAMES[Language(language)]} for all responses."


def build_steering_prompt(text: str) -> str:
    return f"{text}\n\n{STEERING_INSTRUCTION}"


def build_opening_prompt(form: FormData) -> str:
    if form.main_concern.strip():
        concern = form.main_concern.strip().replace("_", " ")
        return f"The patient is experiencing {concern}. Please start the diagnostic inquiry."
    return "Please start the diagnostic inquiry by asking about the patient's main symptoms."


def _numbered(lines: List[str], empty: str) -> str:
    if not lines:
        return empty
    return "\n".join(f"  {i}. {line}" for i, line in enumerate(lines, start=1))


def build_patient_context(form: FormData) -> str:
    bmi = calculate_bmi(form.height, form.weight)
    reports = _numbered(
        [f"{f.name}: {f.extracted_text or 'No text extracted'}" for f in form.files],
        "None uploaded",
    )
    medicines = _numbered(
        [f"{m.name} ({m.content})" if m.content else m.name for m in form.medicines],
        "None reported",
    )
    lines = [
        "PATIENT INFORMATION",
        "Name: " + (form.name or "Anonymous"),
        "Age: " + (form.age or "Not provided"),
        "Gender: " + (form.gender.value if form.gender else "Not provided"),
        "Height: " + (f"{form.height} cm" if form.height else "Not provided"),
        "Weight: " + (f"{form.weight} kg" if form.weight else "Not provided"),
    ]
    if bmi is not None:
        lines.append(f"BMI: {bmi}")
    lines.extend([
        "Chief Complaint: " + (form.main_concern.replace("_", " ") or "Not provided"),
        "Other Symptoms: " + (", ".join(form.symptoms) or "None specified"),
        "Duration: " + (form.symptom_duration.value if form.symptom_duration else "Not provided"),
        "",
        "MEDICAL RECORDS (UPLOADED)",
        reports,
        "",
        "CURRENT MEDICATIONS",
        medicines,
        "",
        "Reference the records and medications when relevant. Start by acknowledging the chief "
        "complaint and ask your first diagnostic question. Do NOT repeat this information verbatim.",
    ])
    return "\n" + "\n".join(lines) + "\n"


def build_summary_request(form: FormData) -> str:
    chat_text = "\n\n".join(
        f"[{m.role.value.upper()}]: {m.content}" for m in form.inquiry_chat
    ) or "No conversation history"
    patient_info = "\n".join([
        "Patient: " + (form.name or "Anonymous"),
        "Age: " + (form.age or "Unknown"),
        "Gender: " + (form.gender.value if form.gender else "Unknown"),
        "Main Concern: " + (form.main_concern or "Not specified"),
    ])
    medicine_info = ""
    if form.medicines:
        medicine_info = "Current Medications:\n" + "\n".join(
            f"- {m.name or m.content}" for m in form.medicines
        )
    return (
        f"{patient_info}\n{medicine_info}\n\nConsultation History:\n{chat_text}\n\n"
        "Please summarize this consultation."
    )


def _observation(analysis, key: str = "observation") -> str:
    if not analysis:
        return "Not provided"
    return str(analysis.get(key) or "Not provided")


def build_final_analysis_request(form: FormData, language: Language = Language.EN) -> str:
    pulse = ", ".join(f"{q.name_en} ({q.name_zh})" for q in form.pulse_qualities) or "Not assessed"
    synced = "Not connected"
    if form.smart_connect_data and form.smart_connect_data.synced_data:
        synced = ", ".join(f"{k}: {v}" for k, v in form.smart_connect_data.synced_data.items())
    sections = [
        build_patient_context(form),
        "INQUIRY SUMMARY",
        form.inquiry_summary or "Not provided",
        "",
        "TONGUE OBSERVATION: " + _observation(form.tongue_analysis),
        "FACE OBSERVATION: " + _observation(form.face_analysis),
        "LISTENING OBSERVATION: " + _observation(form.audio_analysis, "overall_observation"),
        "PULSE: " + (f"{form.bpm} BPM" if form.bpm else "BPM not measured") + "; qualities: " + pulse,
        "WEARABLE DATA: " + synced,
    ]
    return "\n".join(sections) + language_instruction(language)
