"""
AGRI - Localized advisory text for crop image analysis.
Static lookup tables keyed by language code: crop names, detected issues and
recommendations per health category. English is the fallback for any missing
language or key; lookups never raise on runtime input.
"""

from typing import List, Dict, Any

FALLBACK_LANGUAGE = "en"

# --- Supported languages (code, English name, native name) ---
LANGUAGES: List[Dict[str, str]] = [
    {"code": "en", "name": "English", "native_name": "English"},
    {"code": "hi", "name": "Hindi", "native_name": "हिन्दी"},
    {"code": "te", "name": "Telugu", "native_name": "తెలుగు"},
    {"code": "bn", "name": "Bengali", "native_name": "বাংলা"},
    {"code": "ta", "name": "Tamil", "native_name": "தமிழ்"},
    {"code": "kn", "name": "Kannada", "native_name": "ಕನ್ನಡ"},
    {"code": "ml", "name": "Malayalam", "native_name": "മലയാളം"},
    {"code": "as", "name": "Assamese", "native_name": "অসমীয়া"},
]

# --- Crop display names (crop key -> label) ---
# "unknown" is only defined in English; other languages fall back to it.
CROP_NAMES: Dict[str, Dict[str, str]] = {
    "en": {"rice": "Rice", "wheat": "Wheat", "sugarcane": "Sugarcane", "cotton": "Cotton", "unknown": "Unknown Plant"},
    "hi": {"rice": "धान", "wheat": "गेहूं", "sugarcane": "गन्ना", "cotton": "कपास"},
    "te": {"rice": "వరి", "wheat": "గోధుమ", "sugarcane": "చెరకు", "cotton": "పత్తి"},
    "bn": {"rice": "ধান", "wheat": "গম", "sugarcane": "আখ", "cotton": "তুলা"},
    "ta": {"rice": "அரிசி", "wheat": "கோதுமை", "sugarcane": "கரும்பு", "cotton": "பருத்தி"},
    "kn": {"rice": "ಅಕ್ಕಿ", "wheat": "ಗೋಧಿ", "sugarcane": "ಕಬ್ಬು", "cotton": "ಹತ್ತಿ"},
    "ml": {"rice": "അരി", "wheat": "ഗോതമ്പ്", "sugarcane": "കരിമ്പ്", "cotton": "പരുത്തി"},
    "as": {"rice": "ধান", "wheat": "ঘেঁহু", "sugarcane": "আখ", "cotton": "কপাহ"},
}

# --- Detected issues per health category: disease, nutrient, pest, healthy ---
HEALTH_ISSUES: Dict[str, Dict[str, List[str]]] = {
    "en": {
        "disease": [
            "Leaf blight detected in multiple areas",
            "Brown spots indicating fungal infection",
            "Stem rot symptoms visible",
        ],
        "nutrient": [
            "Nitrogen deficiency evident in lower leaves",
            "Yellowing indicates possible iron deficiency",
            "Stunted growth observed",
        ],
        "pest": [
            "Insect damage visible on leaves",
            "Holes in leaves suggest caterpillar infestation",
            "Reduced leaf area affecting photosynthesis",
        ],
        "healthy": [
            "Overall plant health appears good",
            "Minor nutrient optimization possible",
            "Regular monitoring recommended",
        ],
    },
    "hi": {
        "disease": [
            "कई क्षेत्रों में पत्ती झुलसा रोग का पता चला",
            "भूरे धब्बे फंगल संक्रमण का संकेत",
            "तने की सड़न के लक्षण दिखाई दे रहे हैं",
        ],
        "nutrient": [
            "निचली पत्तियों में नाइट्रोजन की कमी स्पष्ट है",
            "पीलापन संभावित आयरन की कमी का संकेत",
            "बौनी वृद्धि देखी गई",
        ],
        "pest": [
            "पत्तियों पर कीट क्षति दिखाई दे रही है",
            "पत्तियों में छेद इल्ली के संक्रमण का सुझाव देते हैं",
            "पत्ती क्षेत्र में कमी प्रकाश संश्लेषण को प्रभावित कर रही है",
        ],
        "healthy": [
            "समग्र पौधे का स्वास्थ्य अच्छा दिखाई दे रहा है",
            "मामूली पोषक तत्व अनुकूलन संभव है",
            "नियमित निगरानी की सिफारिश की जाती है",
        ],
    },
    "te": {
        "disease": [
            "అనేక ప్రాంతాలలో ఆకు కాలిపోవడం గుర్తించబడింది",
            "గోధుమ రంగు మచ్చలు ఫంగల్ ఇన్ఫెక్షన్‌ను సూచిస్తున్నాయి",
            "కాండం కుళ్ళిపోవడం లక్షణాలు కనిపిస్తున్నాయి",
        ],
        "nutrient": [
            "దిగువ ఆకులలో నైట్రోజన్ లోపం స్పష్టంగా కనిపిస్తోంది",
            "పసుపు రంగు మారడం ఐరన్ లోపాన్ని సూచిస్తుంది",
            "పెరుగుదల మందగించడం గమనించబడింది",
        ],
        "pest": [
            "ఆకులపై కీటకాల దెబ్బ కనిపిస్తోంది",
            "ఆకులలో రంధ్రాలు గొంగళి పురుగుల దాడిని సూచిస్తున్నాయి",
            "ఆకుల వైశాల్యం తగ్గడం కిరణజన్య సంయోగక్రియను ప్రభావితం చేస్తోంది",
        ],
        "healthy": [
            "మొత్తం మొక్క ఆరోగ్యం బాగుంది",
            "చిన్న పోషకాల అనుకూలీకరణ సాధ్యం",
            "క్రమం తప్పకుండా పర్యవేక్షణ సిఫార్సు చేయబడింది",
        ],
    },
}

# --- Recommendations per health category ---
HEALTH_RECOMMENDATIONS: Dict[str, Dict[str, List[str]]] = {
    "en": {
        "disease": [
            "Apply copper-based fungicide immediately",
            "Remove affected plant parts and burn them",
            "Improve drainage to prevent waterlogging",
            "Spray neem oil solution twice weekly",
        ],
        "nutrient": [
            "Apply nitrogen-rich fertilizer (urea) immediately",
            "Use iron chelate for iron deficiency",
            "Ensure proper soil pH (6.0-7.0)",
            "Apply organic compost to improve soil health",
        ],
        "pest": [
            "Apply neem-based insecticide spray",
            "Use pheromone traps for pest monitoring",
            "Encourage beneficial insects like ladybugs",
            "Remove heavily infested plant parts",
        ],
        "healthy": [
            "Continue current care routine",
            "Apply balanced NPK fertilizer monthly",
            "Monitor for early signs of pests or diseases",
            "Maintain optimal watering schedule",
        ],
    },
    "hi": {
        "disease": [
            "तुरंत कॉपर आधारित फंगीसाइड का प्रयोग करें",
            "प्रभावित पौधे के हिस्सों को हटाकर जला दें",
            "जल भराव को रोकने के लिए जल निकासी में सुधार करें",
            "सप्ताह में दो बार नीम तेल का घोल छिड़कें",
        ],
        "nutrient": [
            "तुरंत नाइट्रोजन युक्त उर्वरक (यूरिया) का प्रयोग करें",
            "आयरन की कमी के लिए आयरन चेलेट का उपयोग करें",
            "उचित मिट्टी पीएच (6.0-7.0) सुनिश्चित करें",
            "मिट्टी के स्वास्थ्य में सुधार के लिए जैविक खाद डालें",
        ],
        "pest": [
            "नीम आधारित कीटनाशक स्प्रे का प्रयोग करें",
            "कीट निगरानी के लिए फेरोमोन ट्रैप का उपयोग करें",
            "लेडीबग जैसे लाभकारी कीटों को प्रोत्साहित करें",
            "अधिक संक्रमित पौधे के हिस्सों को हटा दें",
        ],
        "healthy": [
            "वर्तमान देखभाल की दिनचर्या जारी रखें",
            "मासिक संतुलित NPK उर्वरक का प्रयोग करें",
            "कीटों या बीमारियों के शुरुआती संकेतों की निगरानी करें",
            "इष्टतम पानी देने का कार्यक्रम बनाए रखें",
        ],
    },
    "te": {
        "disease": [
            "వెంటనే రాగి ఆధారిత శిలీంద్రనాశకం వేయండి",
            "ప్రభావిత మొక్క భాగాలను తొలగించి కాల్చండి",
            "నీరు నిలిచిపోకుండా డ్రైనేజీని మెరుగుపరచండి",
            "వారానికి రెండుసార్లు వేప నూనె ద్రావణం చల్లండి",
        ],
        "nutrient": [
            "వెంటనే నైట్రోజన్ అధికంగా ఉన్న ఎరువు (యూరియా) వేయండి",
            "ఐరన్ లోపానికి ఐరన్ చెలేట్ ఉపయోగించండి",
            "సరైన మట్టి pH (6.0-7.0) నిర్ధారించండి",
            "మట్టి ఆరోగ్యాన్ని మెరుగుపరచడానికి సేంద్రీయ ఎరువు వేయండి",
        ],
        "pest": [
            "వేప ఆధారిత కీటకనాశక స్ప్రే వేయండి",
            "కీటకాల పర్యవేక్షణ కోసం ఫెరోమోన్ ట్రాప్‌లను ఉపయోగించండి",
            "లేడీబగ్‌ల వంటి ప్రయోజనకరమైన కీటకాలను ప్రోత్సహించండి",
            "ఎక్కువగా సోకిన మొక్క భాగాలను తొలగించండి",
        ],
        "healthy": [
            "ప్రస్తుత సంరక్షణ దినచర్యను కొనసాగించండి",
            "నెలవారీ సమతుల్య NPK ఎరువు వేయండి",
            "కీటకాలు లేదా వ్యాధుల ప్రారంభ సంకేతాలను పర్యవేక్షించండి",
            "సరైన నీటిపారుదల షెడ్యూల్‌ను నిర్వహించండి",
        ],
    },
}


def _lookup(table: Dict[str, Dict[str, Any]], key: str, language: str) -> Any:
    """Return table[language][key], falling back to the English entry."""
    localized = table.get(language) or {}
    if key in localized:
        return localized[key]
    return table[FALLBACK_LANGUAGE][key]


def resolve_language(language: str) -> str:
    """Language code actually used for text: the requested one if supported, else English."""
    if any(lang["code"] == language for lang in LANGUAGES):
        return language
    return FALLBACK_LANGUAGE


def get_supported_languages() -> List[Dict[str, str]]:
    return [dict(lang) for lang in LANGUAGES]


def get_crop_name(crop: str, language: str) -> str:
    """Localized crop label. Unknown crop keys are returned unchanged."""
    localized = CROP_NAMES.get(language) or {}
    if crop in localized:
        return localized[crop]
    return CROP_NAMES[FALLBACK_LANGUAGE].get(crop, crop)


def get_issues(category: str, language: str) -> List[str]:
    """Detected-issue lines for a health category (disease, nutrient, pest, healthy)."""
    return list(_lookup(HEALTH_ISSUES, category, language))


def get_recommendations(category: str, language: str) -> List[str]:
    """Recommendation lines for a health category (disease, nutrient, pest, healthy)."""
    return list(_lookup(HEALTH_RECOMMENDATIONS, category, language))
