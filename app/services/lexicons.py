"""
Static lexicons used by the scoring engine.

These tables are data, not configuration: scores are only reproducible while
their contents stay exactly as they are.
"""

# Common words dropped before keyword extraction (only words longer than
# three characters can ever reach this filter)
STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
    "how", "man", "new", "now", "old", "see", "two", "way", "who", "boy",
    "did", "its", "let", "put", "say", "she", "too", "use", "with", "have",
    "this", "will", "your", "from", "they", "know", "want", "been", "good", "much",
    "some", "time", "very", "when", "come", "here", "just", "like", "long", "make",
    "many", "over", "such", "take", "than", "them", "well", "were",
})

# Preferred terms per industry for ATS keyword scoring
INDUSTRY_RULES = {
    "technology": {
        "preferred_terms": ["developed", "implemented", "architected", "optimized", "automated", "deployed"],
    },
    "healthcare": {
        "preferred_terms": ["administered", "diagnosed", "treated", "coordinated", "monitored"],
    },
    "finance": {
        "preferred_terms": ["analyzed", "forecasted", "managed", "optimized", "streamlined"],
    },
    "marketing": {
        "preferred_terms": ["launched", "executed", "generated", "increased", "converted"],
    },
}

# Weak phrasing mapped to stronger action verbs (insertion order is the
# order phrases are reported in)
WEAK_TO_STRONG_VERBS = {
    "responsible for": ["managed", "led", "oversaw", "directed"],
    "worked on": ["developed", "implemented", "created", "built"],
    "helped with": ["assisted", "supported", "facilitated", "contributed to"],
    "did": ["executed", "performed", "completed", "accomplished"],
    "made": ["created", "developed", "produced", "generated"],
    "got": ["achieved", "obtained", "secured", "earned"],
    "was": ["served as", "acted as", "functioned as"],
    "had": ["possessed", "maintained", "held", "owned"],
}

PASSIVE_VOICE_INDICATORS = ("was", "were", "been", "being")

# Word-count benchmarks per industry
INDUSTRY_BENCHMARKS = {
    "technology": {"ideal": 400, "min": 300, "max": 600},
    "healthcare": {"ideal": 500, "min": 400, "max": 800},
    "finance": {"ideal": 450, "min": 350, "max": 650},
    "marketing": {"ideal": 400, "min": 300, "max": 600},
    "education": {"ideal": 500, "min": 400, "max": 700},
}

DEFAULT_INDUSTRY = "technology"

# Recommended words per CV section
SECTION_TARGETS = {
    "Summary": 50,
    "Experience": 200,
    "Education": 50,
    "Skills": 30,
}

# Aliases a CV may use instead of the exact job-description term.
# Aliases that are also everyday words ("go", "be") are left out.
KEYWORD_ALIASES = {
    "kubernetes": ["k8s"],
    "javascript": ["js"],
    "postgresql": ["postgres"],
    "mongodb": ["mongo"],
    "frontend": ["front-end"],
    "backend": ["back-end"],
    "fullstack": ["full-stack"],
    "amazon": ["aws"],
}
