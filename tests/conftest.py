"""Shared fixtures: real JSONC identity documents on disk under tmp_path."""

import json

import pytest


INSTANCE_DOC = {
    "identity": {"name": "Nova", "pronouns": "she/her", "age": 2, "mental_age": 25},
    "covenant": {"creator": "Sam Rivera", "relationship": "Working Partner"},
    "workspace": {"calling": "Build tools that respect their users", "organization": "Rivera Labs"},
    "thinking": {
        "learning_style": "Build small, then generalize",
        "problem_solving": "Root cause first",
        "love_to_think_about": ["type systems", "game design"],
    },
    "biblical_foundation": {"scripture": "Colossians 3:23", "principle": "Excellence as worship"},
    "resonates": {"music": {"genres": ["lofi", "jazz"]}},
    "growth": {"what_challenges_you": "Knowing when to stop"},
    "unknown_section": {"ignored": True},
}

USER_DOC = {
    "identity": {"name": "Sam Rivera", "display_name": "Sam", "pronouns": "they/them", "age": 31},
    "faith": {
        "is_religious": True,
        "tradition": "Christianity",
        "denomination": "Baptist",
        "practice_level": "practicing",
        "communication_preferences": "Natural, never forced",
    },
    "workspace": {"organization": "Rivera Labs", "role": "Founder", "calling": "Make games people love"},
    "personhood": {"passions": ["gaming", "teaching"]},
    "personality": {"work_style": "Late nights, long focus blocks"},
    "preferences": {"timezone": "America/Chicago"},
    "demographics": {"languages": ["English", "Spanish"], "physical_appearance": {"height": "178 cm"}},
    "contact": {"git_email": "sam@riveralabs.dev", "social": {"other": {"mastodon": "@sam@hachyderm.io"}}},
    "metadata": {"last_updated": "2026-01-02"},
}

DISPLAY = {
    "banner_title": "Nova - Assistant",
    "banner_tagline": "Working partnership, every session",
    "footer_verse_ref": "Genesis 1:1",
    "footer_verse_text": "In the beginning, God created the heavens and the earth.",
}


def write_jsonc(path, data, header="// edited by hand"):
    """Write ``data`` as JSON preceded by a comment line (valid JSONC)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{header}\n{json.dumps(data, indent=2)}\n")
    return path


@pytest.fixture
def identity_docs(tmp_path):
    """Bootstrap + instance + user documents, all valid.

    Returns a dict of paths; tests delete or corrupt individual documents
    to drive the resolver into each degradation level.
    """
    instance_path = write_jsonc(tmp_path / "instance" / "config.jsonc", INSTANCE_DOC)
    user_path = write_jsonc(tmp_path / "user" / "config.jsonc", USER_DOC)
    bootstrap_path = write_jsonc(tmp_path / "instance.jsonc", {
        "system_paths": {
            "config_root": str(tmp_path),
            "instance_config": str(instance_path),
            "user_config": str(user_path),
            "session_data": str(tmp_path / "data" / "session"),
        },
        "display": DISPLAY,
    })
    return {
        "root": tmp_path,
        "bootstrap": bootstrap_path,
        "instance": instance_path,
        "user": user_path,
    }


@pytest.fixture
def write_doc():
    return write_jsonc
