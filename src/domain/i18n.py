"""User-facing strings keyed by a typed enum.

Every key declares its English fallback in ``FALLBACKS``; the per-language
tables may be partial and fall back key by key.
"""
from enum import Enum
from typing import Dict


class Language(str, Enum):
    EN = "en"
    ZH = "zh"
    MS = "ms"


class TranslationKey(str, Enum):
    # step labels
    STEP_BASIC_INFO = "steps.basic_info"
    STEP_PROFILE_SUMMARY = "steps.profile_summary"
    STEP_SYMPTOMS = "steps.symptoms"
    STEP_UPLOAD_REPORTS = "steps.upload_reports"
    STEP_UPLOAD_MEDICINE = "steps.upload_medicine"
    STEP_SELECT_DOCTOR = "steps.select_doctor"
    STEP_INQUIRY = "steps.inquiry"
    STEP_INQUIRY_SUMMARY = "steps.inquiry_summary"
    STEP_TONGUE = "steps.tongue"
    STEP_FACE = "steps.face"
    STEP_AUDIO = "steps.audio"
    STEP_PULSE = "steps.pulse"
    STEP_SMART_CONNECT = "steps.smart_connect"
    STEP_ANALYSIS = "steps.analysis"
    STEP_RESULTS = "steps.results"

    # progress phases
    PHASE_PROFILE = "phases.profile"
    PHASE_HISTORY = "phases.history"
    PHASE_INQUIRY = "phases.inquiry"
    PHASE_VITALS = "phases.vitals"
    PHASE_RESULTS = "phases.results"

    # common
    NEXT = "common.next"
    BACK = "common.back"
    ANALYZE = "common.analyze"
    CONFIRM = "common.confirm"
    CANCEL = "common.cancel"
    RETRY = "common.retry"
    YES = "common.yes"
    NO = "common.no"
    SOMETIMES = "common.sometimes"
    NOT_SURE = "common.not_sure"
    EXIT_DIAGNOSIS = "confirm.exit_diagnosis"
    START_NEW_CONFIRM = "confirm.start_new"
    STEP_FAILED = "errors.step_failed"
    GO_BACK = "errors.go_back"

    # capture / analysis errors
    CAMERA_PERMISSION = "errors.camera_permission"
    MICROPHONE_PERMISSION = "errors.microphone_permission"
    CAPTURE_FAILED = "errors.capture_failed"
    ANALYSIS_FAILED = "errors.analysis_failed"
    INVALID_TONGUE = "errors.invalid_tongue"
    INVALID_FACE = "errors.invalid_face"
    INVALID_AUDIO = "errors.invalid_audio"
    REPORT_EXTRACTION_FAILED = "errors.report_extraction_failed"
    SAVE_FAILED = "errors.save_failed"
    VIEW_RESULTS = "errors.view_results"

    # pulse
    PULSE_CONFLICT_WARNING = "pulse.conflict_warning"
    BPM_LOW = "pulse.categories.low"
    BPM_NORMAL = "pulse.categories.normal"
    BPM_HIGH = "pulse.categories.high"

    # bmi
    BMI_UNDERWEIGHT = "bmi.underweight"
    BMI_NORMAL = "bmi.normal"
    BMI_OVERWEIGHT = "bmi.overweight"
    BMI_OBESE = "bmi.obese"

    # inquiry
    INQUIRY_FALLBACK_INTRO = "inquiry.fallback_intro"
    INQUIRY_ERROR_RETRY = "inquiry.error_retry"
    NO_CONSULTATION = "inquiry_summary.no_consultation"
    OPT_FEW_DAYS = "inquiry.options.few_days"
    OPT_ONE_TWO_WEEKS = "inquiry.options.one_two_weeks"
    OPT_MONTH = "inquiry.options.month"
    OPT_MONTHS = "inquiry.options.months"
    OPT_EVERY_DAY = "inquiry.options.every_day"
    OPT_FEW_TIMES_WEEK = "inquiry.options.few_times_week"
    OPT_ONCE_WEEK = "inquiry.options.once_week"
    OPT_OCCASIONALLY = "inquiry.options.occasionally"
    OPT_MILD = "inquiry.options.mild"
    OPT_MODERATE = "inquiry.options.moderate"
    OPT_SEVERE = "inquiry.options.severe"
    OPT_INTENSE = "inquiry.options.intense"
    OPT_SLEEP_WELL = "inquiry.options.sleep_well"
    OPT_TROUBLE_SLEEP = "inquiry.options.trouble_sleep"
    OPT_WAKE_OFTEN = "inquiry.options.wake_often"
    OPT_TIRED = "inquiry.options.tired"
    OPT_NORMAL_APPETITE = "inquiry.options.normal_appetite"
    OPT_REDUCED_APPETITE = "inquiry.options.reduced_appetite"
    OPT_INCREASED_APPETITE = "inquiry.options.increased_appetite"
    OPT_IRREGULAR_MEALS = "inquiry.options.irregular_meals"
    OPT_CALM = "inquiry.options.calm"
    OPT_MILD_STRESS = "inquiry.options.mild_stress"
    OPT_ANXIOUS = "inquiry.options.anxious"
    OPT_VERY_STRESSED = "inquiry.options.very_stressed"
    OPT_MORNING = "inquiry.options.morning"
    OPT_AFTERNOON = "inquiry.options.afternoon"
    OPT_EVENING = "inquiry.options.evening"
    OPT_NIGHT = "inquiry.options.night"
    OPT_HEAD = "inquiry.options.head"
    OPT_CHEST = "inquiry.options.chest"
    OPT_STOMACH = "inquiry.options.stomach"
    OPT_LIMBS = "inquiry.options.limbs"
    OPT_YES_FREQUENTLY = "inquiry.options.yes_frequently"
    OPT_YES_SOMETIMES = "inquiry.options.yes_sometimes"
    OPT_RARELY = "inquiry.options.rarely"
    OPT_NO_NEVER = "inquiry.options.no_never"
    OPT_REPEAT = "inquiry.options.repeat"
    OPT_ASK_ELSE = "inquiry.options.ask_else"
    OPT_CONTINUE = "inquiry.options.continue"

    # screens
    APP_TITLE = "app.title"
    LANGUAGE = "app.language"
    LOGOUT = "app.logout"
    HOME_TITLE = "home.title"
    HOME_START = "home.start"
    STEP_PROGRESS = "wizard.progress"
    EXIT = "wizard.exit"
    START_NEW = "wizard.start_new"
    CONTINUE = "common.continue"
    SKIP = "common.skip"
    EDIT = "common.edit"
    ADD = "common.add"
    REMOVE = "common.remove"
    ANALYZING = "common.analyzing"
    FIELD_NAME = "basic_info.name"
    FIELD_AGE = "basic_info.age"
    FIELD_GENDER = "basic_info.gender"
    FIELD_HEIGHT = "basic_info.height"
    FIELD_WEIGHT = "basic_info.weight"
    GENDER_MALE = "basic_info.gender_male"
    GENDER_FEMALE = "basic_info.gender_female"
    GENDER_OTHER = "basic_info.gender_other"
    INVALID_NUMBER = "basic_info.invalid_number"
    BMI_LABEL = "basic_info.bmi"
    PROFILE_INCOMPLETE = "profile_summary.incomplete"
    MAIN_CONCERN = "symptoms.main_concern"
    SYMPTOM_VIEW = "symptoms.view"
    OTHER_SYMPTOMS = "symptoms.other"
    SYMPTOM_DETAILS = "symptoms.details"
    DURATION = "symptoms.duration"
    UPLOAD_REPORT = "upload_reports.upload"
    EXTRACTED_TEXT = "upload_reports.extracted_text"
    ADD_WITHOUT_TEXT = "upload_reports.add_without_text"
    MEDICINE_NAME = "upload_medicine.name"
    MEDICINE_PHOTO = "upload_medicine.photo"
    CHOOSE_DOCTOR = "select_doctor.title"
    TYPE_MESSAGE = "inquiry.type_message"
    SUMMARY_GENERATING = "inquiry_summary.generating"
    SUMMARY_ELAPSED = "inquiry_summary.elapsed"
    TAKE_PHOTO = "capture.take_photo"
    OR_UPLOAD = "capture.or_upload"
    RETAKE = "capture.retake"
    RECORD_VOICE = "capture.record_voice"
    OBSERVATION = "capture.observation"
    PATTERNS = "capture.patterns"
    CONFIDENCE = "capture.confidence"
    BPM_INPUT = "pulse.bpm_input"
    START_COUNT = "pulse.start_count"
    TAP_BEAT = "pulse.tap_beat"
    COUNTING = "pulse.counting"
    PULSE_QUALITIES = "pulse.qualities"
    PLATFORM = "smart_connect.platform"
    DATA_PERMISSIONS = "smart_connect.permissions"
    CONNECT = "smart_connect.connect"
    DEVICES = "smart_connect.devices"
    DISCONNECT = "smart_connect.disconnect"
    DISCONNECT_CONFIRM = "smart_connect.disconnect_confirm"
    CONNECTION_ISSUE = "analysis.connection_issue"
    GUEST_NOT_SAVED = "results.guest_not_saved"
    RESULTS_TITLE = "results.title"
    PRIMARY_PATTERN = "results.primary_pattern"
    CONSTITUTION = "results.constitution"
    TREATMENT = "results.treatment"
    RECOMMENDATIONS = "results.recommendations"

    # account
    LOGIN_TITLE = "auth.login_title"
    LOGIN_SUBTITLE = "auth.login_subtitle"
    REGISTER_TITLE = "auth.register_title"
    EMAIL = "auth.email"
    PASSWORD = "auth.password"
    CONFIRM_PASSWORD = "auth.confirm_password"
    FIRST_NAME = "auth.first_name"
    LAST_NAME = "auth.last_name"
    PASSWORD_RULES = "auth.password_rules"
    LOGIN = "auth.login"
    REGISTER = "auth.register"
    TO_REGISTER = "auth.to_register"
    TO_LOGIN = "auth.to_login"
    CONTINUE_AS_GUEST = "auth.guest"
    MISSING_CREDENTIALS = "auth.missing_credentials"
    INVALID_CREDENTIALS = "auth.invalid_credentials"
    WELCOME_BACK = "auth.welcome_back"
    REGISTERED = "auth.registered"


K = TranslationKey

FALLBACKS: Dict[TranslationKey, str] = {
    K.STEP_BASIC_INFO: "Basic Info",
    K.STEP_PROFILE_SUMMARY: "Summary",
    K.STEP_SYMPTOMS: "Symptoms",
    K.STEP_UPLOAD_REPORTS: "Reports",
    K.STEP_UPLOAD_MEDICINE: "Medicine",
    K.STEP_SELECT_DOCTOR: "Doctor",
    K.STEP_INQUIRY: "Inquiry",
    K.STEP_INQUIRY_SUMMARY: "Inquiry Summary",
    K.STEP_TONGUE: "Tongue",
    K.STEP_FACE: "Face",
    K.STEP_AUDIO: "Voice",
    K.STEP_PULSE: "Pulse",
    K.STEP_SMART_CONNECT: "Devices",
    K.STEP_ANALYSIS: "Analysis",
    K.STEP_RESULTS: "Results",
    K.PHASE_PROFILE: "Profile",
    K.PHASE_HISTORY: "History",
    K.PHASE_INQUIRY: "Inquiry",
    K.PHASE_VITALS: "Vitals",
    K.PHASE_RESULTS: "Results",
    K.NEXT: "Next",
    K.BACK: "Back",
    K.ANALYZE: "Analyze",
    K.CONFIRM: "Confirm",
    K.CANCEL: "Cancel",
    K.RETRY: "Retry",
    K.YES: "Yes",
    K.NO: "No",
    K.SOMETIMES: "Sometimes",
    K.NOT_SURE: "Not sure",
    K.EXIT_DIAGNOSIS: "Exit diagnosis? Progress will be lost.",
    K.START_NEW_CONFIRM: "Start a new assessment? Your current results will be cleared.",
    K.STEP_FAILED: "Something went wrong on this step.",
    K.GO_BACK: "Go back",
    K.CAMERA_PERMISSION: "Camera permission is needed to take photos for analysis.",
    K.MICROPHONE_PERMISSION: "Microphone permission is needed to record your voice.",
    K.CAPTURE_FAILED: "Failed to capture media. Please try again.",
    K.ANALYSIS_FAILED: "Failed to analyze. Please try again.",
    K.INVALID_TONGUE: "This image does not appear to be a tongue. Please take a clear photo of your tongue.",
    K.INVALID_FACE: "This image does not appear to be a face. Please take a clear photo of your face.",
    K.INVALID_AUDIO: "The recording could not be used. Please record again in a quiet place.",
    K.REPORT_EXTRACTION_FAILED: "Failed to analyze report. You can still add it and edit text manually.",
    K.SAVE_FAILED: "Could not save your diagnostic history to the cloud, but your results are ready.",
    K.VIEW_RESULTS: "View Results",
    K.PULSE_CONFLICT_WARNING: "{first} cannot be selected together with {second}.",
    K.BPM_LOW: "Low",
    K.BPM_NORMAL: "Normal",
    K.BPM_HIGH: "High",
    K.BMI_UNDERWEIGHT: "Underweight",
    K.BMI_NORMAL: "Normal",
    K.BMI_OVERWEIGHT: "Overweight",
    K.BMI_OBESE: "Obese",
    K.INQUIRY_FALLBACK_INTRO: (
        "Hello! I'm here to help understand your health concerns. "
        "Could you describe what symptoms you're experiencing?"
    ),
    K.INQUIRY_ERROR_RETRY: "I apologize for the interruption. Could you please repeat that?",
    K.NO_CONSULTATION: "No consultation details available to summarize.",
    K.OPT_FEW_DAYS: "A few days",
    K.OPT_ONE_TWO_WEEKS: "1-2 weeks",
    K.OPT_MONTH: "About a month",
    K.OPT_MONTHS: "Several months",
    K.OPT_EVERY_DAY: "Every day",
    K.OPT_FEW_TIMES_WEEK: "A few times a week",
    K.OPT_ONCE_WEEK: "Once a week",
    K.OPT_OCCASIONALLY: "Occasionally",
    K.OPT_MILD: "Mild",
    K.OPT_MODERATE: "Moderate",
    K.OPT_SEVERE: "Quite severe",
    K.OPT_INTENSE: "Very intense",
    K.OPT_SLEEP_WELL: "Sleep well",
    K.OPT_TROUBLE_SLEEP: "Trouble falling asleep",
    K.OPT_WAKE_OFTEN: "Wake up often",
    K.OPT_TIRED: "Always tired",
    K.OPT_NORMAL_APPETITE: "Normal appetite",
    K.OPT_REDUCED_APPETITE: "Reduced appetite",
    K.OPT_INCREASED_APPETITE: "Increased appetite",
    K.OPT_IRREGULAR_MEALS: "Irregular meals",
    K.OPT_CALM: "Feeling calm",
    K.OPT_MILD_STRESS: "Mildly stressed",
    K.OPT_ANXIOUS: "Quite anxious",
    K.OPT_VERY_STRESSED: "Very stressed",
    K.OPT_MORNING: "Morning",
    K.OPT_AFTERNOON: "Afternoon",
    K.OPT_EVENING: "Evening",
    K.OPT_NIGHT: "At night",
    K.OPT_HEAD: "Head/neck area",
    K.OPT_CHEST: "Chest/upper body",
    K.OPT_STOMACH: "Stomach/abdomen",
    K.OPT_LIMBS: "Back/limbs",
    K.OPT_YES_FREQUENTLY: "Yes, frequently",
    K.OPT_YES_SOMETIMES: "Yes, sometimes",
    K.OPT_RARELY: "Rarely",
    K.OPT_NO_NEVER: "No, never",
    K.OPT_REPEAT: "Repeat my last answer",
    K.OPT_ASK_ELSE: "Ask me something else",
    K.OPT_CONTINUE: "Continue from here",
    K.APP_TITLE: "TCM Health Assessment",
    K.LANGUAGE: "Language",
    K.LOGOUT: "Logout",
    K.HOME_TITLE: "Your health, the TCM way",
    K.HOME_START: "Start assessment",
    K.STEP_PROGRESS: "Step {current} of {total}",
    K.EXIT: "Exit",
    K.START_NEW: "Start new assessment",
    K.CONTINUE: "Continue",
    K.SKIP: "Skip",
    K.EDIT: "Edit",
    K.ADD: "Add",
    K.REMOVE: "Remove",
    K.ANALYZING: "Analyzing...",
    K.FIELD_NAME: "Full name",
    K.FIELD_AGE: "Age",
    K.FIELD_GENDER: "Gender",
    K.FIELD_HEIGHT: "Height (cm)",
    K.FIELD_WEIGHT: "Weight (kg)",
    K.GENDER_MALE: "Male",
    K.GENDER_FEMALE: "Female",
    K.GENDER_OTHER: "Other",
    K.INVALID_NUMBER: "Please enter numbers only.",
    K.BMI_LABEL: "BMI",
    K.PROFILE_INCOMPLETE: "Please complete your name, age, gender, height and weight.",
    K.MAIN_CONCERN: "What is your main concern?",
    K.SYMPTOM_VIEW: "Browse symptoms",
    K.OTHER_SYMPTOMS: "Other symptoms",
    K.SYMPTOM_DETAILS: "Describe your symptoms",
    K.DURATION: "How long have you had these symptoms?",
    K.UPLOAD_REPORT: "Upload a medical report",
    K.EXTRACTED_TEXT: "Extracted text",
    K.ADD_WITHOUT_TEXT: "Add without text",
    K.MEDICINE_NAME: "Medicine name",
    K.MEDICINE_PHOTO: "Photo of a medicine",
    K.CHOOSE_DOCTOR: "Choose your doctor",
    K.TYPE_MESSAGE: "Type your answer...",
    K.SUMMARY_GENERATING: "Summarizing your consultation...",
    K.SUMMARY_ELAPSED: "Generated in {seconds}s",
    K.TAKE_PHOTO: "Take a photo",
    K.OR_UPLOAD: "Or upload a photo",
    K.RETAKE: "Retake",
    K.RECORD_VOICE: "Record your voice",
    K.OBSERVATION: "Observation",
    K.PATTERNS: "Possible patterns",
    K.CONFIDENCE: "Confidence",
    K.BPM_INPUT: "Heart rate (BPM)",
    K.START_COUNT: "Count my pulse for {seconds} seconds",
    K.TAP_BEAT: "Tap on each beat",
    K.COUNTING: "Counting for {seconds} seconds...",
    K.PULSE_QUALITIES: "Pulse qualities",
    K.PLATFORM: "Platform",
    K.DATA_PERMISSIONS: "Data to sync",
    K.CONNECT: "Connect",
    K.DEVICES: "Wearable devices",
    K.DISCONNECT: "Disconnect",
    K.DISCONNECT_CONFIRM: "Disconnect and discard the synced data?",
    K.CONNECTION_ISSUE: "Connection Issue",
    K.GUEST_NOT_SAVED: "You are using guest mode, so this report was not saved.",
    K.RESULTS_TITLE: "Your TCM Report",
    K.PRIMARY_PATTERN: "Primary pattern",
    K.CONSTITUTION: "Constitution",
    K.TREATMENT: "Treatment",
    K.RECOMMENDATIONS: "Recommendations",
    K.LOGIN_TITLE: "Login",
    K.LOGIN_SUBTITLE: "Sign in to keep your TCM assessment history.",
    K.REGISTER_TITLE: "Register",
    K.EMAIL: "Email",
    K.PASSWORD: "Password",
    K.CONFIRM_PASSWORD: "Confirm Password",
    K.FIRST_NAME: "First Name",
    K.LAST_NAME: "Last Name",
    K.PASSWORD_RULES: "Use at least 8 characters with uppercase, lowercase, a number and a special character.",
    K.LOGIN: "Login",
    K.REGISTER: "Register",
    K.TO_REGISTER: "Need an account? Register",
    K.TO_LOGIN: "Already have an account? Login",
    K.CONTINUE_AS_GUEST: "Continue as guest",
    K.MISSING_CREDENTIALS: "Please enter both email and password",
    K.INVALID_CREDENTIALS: "Invalid email or password",
    K.WELCOME_BACK: "Welcome back, {name}!",
    K.REGISTERED: "Account created. Please log in to continue.",
}

TRANSLATIONS: Dict[Language, Dict[TranslationKey, str]] = {
    Language.EN: {},
    Language.ZH: {
        K.STEP_BASIC_INFO: "基本信息",
        K.STEP_PROFILE_SUMMARY: "资料确认",
        K.STEP_SYMPTOMS: "症状",
        K.STEP_UPLOAD_REPORTS: "报告",
        K.STEP_UPLOAD_MEDICINE: "药物",
        K.STEP_SELECT_DOCTOR: "医生",
        K.STEP_INQUIRY: "问诊",
        K.STEP_INQUIRY_SUMMARY: "问诊总结",
        K.STEP_TONGUE: "舌诊",
        K.STEP_FACE: "面诊",
        K.STEP_AUDIO: "闻诊",
        K.STEP_PULSE: "切诊",
        K.STEP_SMART_CONNECT: "设备",
        K.STEP_ANALYSIS: "分析",
        K.STEP_RESULTS: "结果",
        K.PHASE_PROFILE: "资料",
        K.PHASE_HISTORY: "病史",
        K.PHASE_INQUIRY: "问诊",
        K.PHASE_VITALS: "四诊",
        K.PHASE_RESULTS: "结果",
        K.NEXT: "下一步",
        K.BACK: "返回",
        K.ANALYZE: "分析",
        K.CONFIRM: "确认",
        K.CANCEL: "取消",
        K.RETRY: "重试",
        K.YES: "是",
        K.NO: "否",
        K.SOMETIMES: "有时",
        K.NOT_SURE: "不确定",
        K.EXIT_DIAGNOSIS: "退出诊断？当前进度将会丢失。",
        K.START_NEW_CONFIRM: "开始新的评估？当前结果将被清除。",
        K.STEP_FAILED: "此步骤出现问题。",
        K.GO_BACK: "返回上一步",
        K.CAMERA_PERMISSION: "需要相机权限才能拍照分析。",
        K.MICROPHONE_PERMISSION: "需要麦克风权限才能录音。",
        K.CAPTURE_FAILED: "采集失败，请重试。",
        K.ANALYSIS_FAILED: "分析失败，请重试。",
        K.INVALID_TONGUE: "这张图片似乎不是舌头，请拍摄清晰的舌头照片。",
        K.INVALID_FACE: "这张图片似乎不是面部，请拍摄清晰的面部照片。",
        K.INVALID_AUDIO: "录音无法使用，请在安静的环境中重新录制。",
        K.SAVE_FAILED: "无法将诊断记录保存到云端，但您的结果已准备好。",
        K.VIEW_RESULTS: "查看结果",
        K.PULSE_CONFLICT_WARNING: "{first}与{second}不能同时选择。",
        K.BPM_LOW: "偏低",
        K.BPM_NORMAL: "正常",
        K.BPM_HIGH: "偏高",
        K.BMI_UNDERWEIGHT: "偏瘦",
        K.BMI_NORMAL: "正常",
        K.BMI_OVERWEIGHT: "超重",
        K.BMI_OBESE: "肥胖",
        K.INQUIRY_FALLBACK_INTRO: "您好！我来帮助了解您的健康问题。请描述一下您的症状？",
        K.INQUIRY_ERROR_RETRY: "抱歉刚才中断了，能请您再说一遍吗？",
        K.NO_CONSULTATION: "没有可总结的问诊内容。",
        K.APP_TITLE: "中医健康评估",
        K.LANGUAGE: "语言",
        K.LOGOUT: "退出登录",
        K.HOME_START: "开始评估",
        K.STEP_PROGRESS: "第 {current} 步，共 {total} 步",
        K.EXIT: "退出",
        K.START_NEW: "开始新的评估",
        K.CONTINUE: "继续",
        K.SKIP: "跳过",
        K.EDIT: "编辑",
        K.ADD: "添加",
        K.REMOVE: "删除",
        K.ANALYZING: "分析中...",
        K.FIELD_NAME: "姓名",
        K.FIELD_AGE: "年龄",
        K.FIELD_GENDER: "性别",
        K.FIELD_HEIGHT: "身高 (cm)",
        K.FIELD_WEIGHT: "体重 (kg)",
        K.GENDER_MALE: "男",
        K.GENDER_FEMALE: "女",
        K.GENDER_OTHER: "其他",
        K.INVALID_NUMBER: "请输入数字。",
        K.MAIN_CONCERN: "您的主要不适是什么？",
        K.SYMPTOM_DETAILS: "描述您的症状",
        K.DURATION: "症状持续多久了？",
        K.CHOOSE_DOCTOR: "选择医生",
        K.TYPE_MESSAGE: "输入您的回答...",
        K.TAKE_PHOTO: "拍照",
        K.RETAKE: "重拍",
        K.RECORD_VOICE: "录制您的声音",
        K.PULSE_QUALITIES: "脉象",
        K.DISCONNECT: "断开连接",
        K.CONNECTION_ISSUE: "连接问题",
        K.RESULTS_TITLE: "您的中医报告",
        K.PRIMARY_PATTERN: "主要证型",
        K.CONSTITUTION: "体质",
        K.TREATMENT: "治疗",
        K.RECOMMENDATIONS: "建议",
        K.LOGIN_TITLE: "登录",
        K.REGISTER_TITLE: "注册",
        K.EMAIL: "电子邮件",
        K.PASSWORD: "密码",
        K.CONFIRM_PASSWORD: "确认密码",
        K.FIRST_NAME: "名",
        K.LAST_NAME: "姓",
        K.LOGIN: "登录",
        K.REGISTER: "注册",
        K.CONTINUE_AS_GUEST: "以访客身份继续",
        K.INVALID_CREDENTIALS: "电子邮件或密码错误",
        K.WELCOME_BACK: "欢迎回来，{name}！",
    },
    Language.MS: {
        K.STEP_BASIC_INFO: "Maklumat Asas",
        K.STEP_SYMPTOMS: "Simptom",
        K.STEP_INQUIRY: "Pertanyaan",
        K.STEP_TONGUE: "Lidah",
        K.STEP_FACE: "Muka",
        K.STEP_AUDIO: "Suara",
        K.STEP_PULSE: "Nadi",
        K.STEP_ANALYSIS: "Analisis",
        K.STEP_RESULTS: "Keputusan",
        K.NEXT: "Seterusnya",
        K.BACK: "Kembali",
        K.CONFIRM: "Sahkan",
        K.CANCEL: "Batal",
        K.YES: "Ya",
        K.NO: "Tidak",
        K.EXIT_DIAGNOSIS: "Keluar dari diagnosis? Kemajuan akan hilang.",
    },
}

_missing = [key for key in TranslationKey if key not in FALLBACKS]
if _missing:
    raise RuntimeError(f"Translation keys without fallback: {_missing}")


def translate(key: TranslationKey, language: Language = Language.EN, **params: str) -> str:
    table = TRANSLATIONS.get(Language(language), {})
    text = table.get(key, FALLBACKS[key])
    if params:
        text = text.format(**params)
    return text
