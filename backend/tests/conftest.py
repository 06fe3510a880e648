"""Shared test fixtures."""

import itertools

import pytest


SAMPLE_RESUME = """Priya Sharma
priya.sharma92@gmail.com | +91 98765 43210
Present Address: 42 MG Road, Bengaluru, Karnataka

Summary
Backend developer with 4 years of experience building Python and Java services.

Experience
Software Engineer
Acme Technologies
06/2019 - 03/2021
• Built internal tools with Python, Django and PostgreSQL
• Containerised services with Docker and Kubernetes on AWS

Senior Software Engineer
2021 - Present
Globex Corporation
Led migration of batch jobs to Kafka streams.

Education
B.Tech in Computer Engineering
University of Mumbai, 2019
Aggregate 78.5%

Skills
Python, Java, Django, PostgreSQL, Docker, Kubernetes, AWS, Kafka, Git

Languages
English, Hindi, Marathi
"""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sequential_ids():
    """Id factory returning id-0001, id-0002, ... in call order."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"
