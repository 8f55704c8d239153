"""Weighted lexicons for the heuristic classifier.

Words are stored the way they look after sanitization: lowercase, no
apostrophes ("dont", "cant").
"""

from typing import Dict

NEGATORS = frozenset({
    "not", "no", "never", "none", "nobody", "nothing", "neither", "nor",
    "without", "hardly", "barely", "cannot",
    "dont", "doesnt", "didnt", "isnt", "arent", "wasnt", "werent",
    "cant", "couldnt", "wont", "wouldnt", "shouldnt", "havent", "hasnt",
    "hadnt", "aint",
})

INTENSIFIERS = frozenset({
    "very", "extremely", "really", "so", "super", "totally", "completely",
    "incredibly", "absolutely", "seriously", "highly", "insanely",
})

POSITIVE: Dict[str, int] = {
    # strong
    "love": 3, "amazing": 3, "excellent": 3, "fantastic": 3, "awesome": 3,
    "brilliant": 3, "outstanding": 3, "wonderful": 3,
    # moderate
    "great": 2, "happy": 2, "glad": 2, "excited": 2, "proud": 2,
    "appreciate": 2, "grateful": 2, "thankful": 2, "enjoy": 2, "enjoying": 2,
    "impressive": 2, "smooth": 2, "productive": 2,
    # mild
    "good": 1, "nice": 1, "thanks": 1, "thank": 1, "helpful": 1, "fine": 1,
    "easy": 1, "fast": 1, "solid": 1, "works": 1, "fixed": 1, "improved": 1,
    "clear": 1, "calm": 1, "fun": 1,
}

NEGATIVE: Dict[str, int] = {
    # strong
    "terrible": 3, "awful": 3, "horrible": 3, "hate": 3, "worst": 3,
    "useless": 3, "unacceptable": 3, "miserable": 3, "disaster": 3,
    # moderate
    "angry": 2, "frustrated": 2, "frustrating": 2, "annoying": 2, "annoyed": 2,
    "broken": 2, "exhausted": 2, "upset": 2, "disappointed": 2, "stressed": 2,
    "unhappy": 2, "sad": 2, "worried": 2, "furious": 2, "ridiculous": 2,
    # mild
    "bad": 1, "problem": 1, "issue": 1, "issues": 1, "bug": 1, "wrong": 1,
    "slow": 1, "stuck": 1, "confusing": 1, "difficult": 1, "hard": 1,
    "tired": 1, "failed": 1, "failing": 1, "blocked": 1, "late": 1,
}

BURNOUT: Dict[str, int] = {
    "burnout": 3, "burned": 2, "burnt": 2, "exhausted": 3, "drained": 3,
    "overwhelmed": 3, "tired": 1, "sleep": 1, "weekend": 1, "weekends": 1,
    "overtime": 2, "nights": 1, "break": 1, "vacation": 1,
}

ATTRITION: Dict[str, int] = {
    "quit": 3, "quitting": 3, "resign": 3, "resigning": 3, "resignation": 3,
    "leaving": 2, "interview": 2, "interviewing": 2, "offer": 1,
    "recruiter": 2, "linkedin": 1, "notice": 1, "elsewhere": 2,
}

CONFLICT: Dict[str, int] = {
    "blame": 3, "blamed": 3, "toxic": 3, "argument": 2, "argue": 2,
    "arguing": 2, "disrespect": 3, "disrespectful": 3, "rude": 2,
    "ignored": 2, "micromanage": 2, "micromanaging": 2, "politics": 2,
    "conflict": 2, "fight": 2,
}

WORKLOAD: Dict[str, int] = {
    "deadline": 2, "deadlines": 2, "overloaded": 3, "backlog": 2,
    "workload": 3, "swamped": 3, "crunch": 3, "understaffed": 3,
    "urgent": 1, "asap": 1, "pressure": 2, "behind": 1, "scope": 1,
}

TOOLING: Dict[str, int] = {
    "deployment": 2, "deploy": 2, "deploys": 2, "pipeline": 2, "build": 1,
    "builds": 1, "tooling": 2, "jira": 1, "flaky": 3, "buggy": 2, "crash": 2,
    "crashing": 2, "outage": 3, "laggy": 2, "broken": 2, "vpn": 1,
    "legacy": 1, "ci": 1,
}

EMOTIONAL: Dict[str, int] = {
    "anxious": 3, "anxiety": 3, "depressed": 3, "lonely": 3, "scared": 2,
    "afraid": 2, "crying": 3, "hopeless": 3, "panic": 3, "nervous": 2,
    "hurt": 2, "sad": 2, "upset": 1,
}

# Risk label attached to a hit in each non-polarity category
CATEGORY_LABELS: Dict[str, str] = {
    "burnout": "burnout_risk",
    "attrition": "attrition_risk",
    "conflict": "conflict_risk",
    "workload": "workload_pressure",
    "tooling": "tooling_frustration",
    "emotional": "emotional_distress",
}

RISK_LEXICONS: Dict[str, Dict[str, int]] = {
    "burnout": BURNOUT,
    "attrition": ATTRITION,
    "conflict": CONFLICT,
    "workload": WORKLOAD,
    "tooling": TOOLING,
    "emotional": EMOTIONAL,
}
