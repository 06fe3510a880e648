"""Keyword tables used by the extractors.

All tables are tuples: their declaration order is the order in which matches
are reported, so extending a table never reorders existing results.
"""

# Technical skills, reported in this order and in this case
SKILL_KEYWORDS: tuple[str, ...] = (
    # Languages
    "javascript", "typescript", "python", "java", "c++", "c#", "golang",
    "ruby", "php", "kotlin", "swift", "scala", "rust",
    # Frontend
    "react", "angular", "vue", "next.js", "redux", "html", "html5", "css", "css3",
    "tailwind", "bootstrap", "jquery",
    # Backend
    "node.js", "express", "django", "flask", "fastapi", "spring",
    "spring boot", ".net", "graphql", "rest api",
    # Data stores
    "sql", "mysql", "postgresql", "mongodb", "redis", "elasticsearch",
    "oracle", "dynamodb", "firebase",
    # Cloud & DevOps
    "docker", "kubernetes", "aws", "azure", "gcp", "terraform",
    "jenkins", "ci/cd", "linux", "nginx",
    # Messaging
    "kafka", "rabbitmq",
    # Data & ML
    "pandas", "numpy", "tensorflow", "pytorch", "machine learning",
    "power bi", "tableau", "excel",
    # Tools
    "git", "github", "jira", "figma", "postman",
    # Methodologies
    "agile", "scrum", "microservices",
)

# Spoken languages, title-cased on output
LANGUAGE_KEYWORDS: tuple[str, ...] = (
    "english",
    "hindi",
    "bengali",
    "kannada",
    "tamil",
    "telugu",
    "marathi",
    "gujarati",
    "punjabi",
    "urdu",
)

# Canonical degree token -> pattern. Longer tokens first so "M.Com" never
# loses to a shorter prefix.
DEGREE_PATTERNS: tuple[tuple[str, str], ...] = (
    ("B.Tech", r"B\.?\s?Tech"),
    ("M.Tech", r"M\.?\s?Tech"),
    ("B.Com", r"B\.?\s?Com"),
    ("M.Com", r"M\.?\s?Com"),
    ("B.Sc", r"B\.?\s?Sc"),
    ("M.Sc", r"M\.?\s?Sc"),
    ("MBA", r"M\.?B\.?A"),
    ("PGDM", r"PGDM"),
    ("LLB", r"LL\.?B"),
    ("BCA", r"BCA"),
    ("MCA", r"MCA"),
    ("PhD", r"Ph\.?\s?D"),
    ("B.E", r"B\.E"),
    ("M.E", r"M\.E"),
    ("B.A", r"B\.A"),
    ("M.A", r"M\.A"),
)

SPECIALIZATION_KEYWORDS: tuple[str, ...] = (
    "Finance",
    "Physics",
    "Marketing",
    "Computer",
    "Engineering",
    "Commerce",
    "Science",
    "Mathematics",
    "Chemistry",
    "Economics",
    "Electronics",
    "Mechanical",
    "Civil",
    "Accounting",
    "Human Resources",
    "Information Technology",
)

INSTITUTION_KEYWORDS: tuple[str, ...] = (
    "University",
    "Institute",
    "College",
    "School",
)

# Headings that close the experience section's description accumulation
SECTION_BOUNDARY_HEADINGS: tuple[str, ...] = (
    "education",
    "skills",
    "technical skills",
    "projects",
    "summary",
    "profile",
    "declaration",
    "certifications",
    "achievements",
    "languages",
    "hobbies",
    "interests",
    "references",
)

EXPERIENCE_HEADINGS: tuple[str, ...] = (
    "experience",
    "work experience",
)

ADDRESS_LABELS: tuple[str, ...] = (
    "residential address",
    "present address",
    "permanent address",
    "address",
)
