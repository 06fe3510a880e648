"""Shared dependencies for API routes."""

from services.profile_assembler import IdFactory, new_id


def get_id_factory() -> IdFactory:
    return new_id
