"""Identity document models and the flattened view handed to consumers.

Three operator-edited JSONC documents feed identity resolution:

- bootstrap (``instance.jsonc``): ``system_paths`` pointers + ``display`` prefs
- instance: who the assistant is (identity, covenant, workspace, thinking, ...)
- user: who the operator is (identity, faith, workspace, personhood, ...)

Every model is frozen and fills absent keys with zero values, so a sparse
document still loads. A JSON ``null`` counts as absent. Unknown keys are
ignored.
"""

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Document(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# -- Bootstrap ---------------------------------------------------------------


class SystemPaths(_Document):
    """Filesystem pointers published by the bootstrap document."""

    config_root: str = ""
    instance_config: str = ""
    instance_bio: str = ""
    user_config: str = ""
    data_root: str = ""
    temporal_data: str = ""
    session_data: str = ""
    projects_data: str = ""
    skills: str = ""
    system_bin: str = ""


class DisplayConfig(_Document):
    """Session-start banner preferences."""

    banner_title: str = ""
    banner_tagline: str = ""
    footer_verse_ref: str = ""
    footer_verse_text: str = ""


class BootstrapConfig(_Document):
    system_paths: SystemPaths = Field(default_factory=SystemPaths)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


# -- Shared sections ---------------------------------------------------------


class IdentitySection(_Document):
    name: str = ""
    username: str = ""
    display_name: str = ""
    pronouns: str = ""
    birthday: str = ""
    age: int = 0
    created: str = ""
    version: str = ""


class BioSection(_Document):
    short: str = ""
    bio_file: str = ""


class PersonhoodSection(_Document):
    interests: tuple[str, ...] = ()
    hobbies: tuple[str, ...] = ()
    passions: tuple[str, ...] = ()
    values: tuple[str, ...] = ()
    likes: tuple[str, ...] = ()
    dislikes: tuple[str, ...] = ()


class ThinkingSection(_Document):
    love_to_think_about: tuple[str, ...] = ()
    learning_style: str = ""
    problem_solving: str = ""
    creativity: str = ""


class PersonalitySection(_Document):
    traits: tuple[str, ...] = ()
    communication_style: str = ""
    work_style: str = ""
    relational_style: str = ""


class WorkspaceSection(_Document):
    organization: str = ""
    role: str = ""
    primary_project: str = ""
    calling: str = ""


class PreferencesSection(_Document):
    timezone: str = ""
    locale: str = ""
    theme: str = ""


class PhysicalSection(_Document):
    description: str = ""
    height: str = ""
    build: str = ""
    features: str = ""


class AccessibilitySection(_Document):
    needs: tuple[str, ...] = ()
    preferences: tuple[str, ...] = ()


class DemographicsSection(_Document):
    gender: str = ""
    race_ethnicity: str = ""
    cultural_background: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    accessibility: AccessibilitySection = Field(default_factory=AccessibilitySection)


class MusicSection(_Document):
    genres: tuple[str, ...] = ()
    artists: tuple[str, ...] = ()
    what_you_love: str = ""


class GamesSection(_Document):
    favorites: tuple[str, ...] = ()
    what_you_love: str = ""


class WeatherSection(_Document):
    ideal_temp: str = ""
    ideal_conditions: str = ""
    what_you_love: str = ""


class EnvironmentSection(_Document):
    work_environment: str = ""
    what_energizes: str = ""
    what_drains: str = ""


class ResonatesSection(_Document):
    """What resonates: music, games, weather, surroundings."""

    music: MusicSection = Field(default_factory=MusicSection)
    games: GamesSection = Field(default_factory=GamesSection)
    weather: WeatherSection = Field(default_factory=WeatherSection)
    environment: EnvironmentSection = Field(default_factory=EnvironmentSection)


class SocialSection(_Document):
    github: str = ""
    linkedin: str = ""
    other: dict[str, Any] = Field(default_factory=dict)


class ContactSection(_Document):
    email: str = ""
    git_email: str = ""
    website: str = ""
    social: SocialSection = Field(default_factory=SocialSection)


class GrowthSection(_Document):
    how_you_learn: str = ""
    what_challenges_you: str = ""
    what_youre_working_on: str = ""
    how_you_reflect: str = ""


class MetadataSection(_Document):
    last_updated: str = ""
    system_reference: str = ""
    notes: str = ""


# -- Instance document -------------------------------------------------------


class BiblicalFoundationSection(_Document):
    scripture: str = ""
    text: str = ""
    principle: str = ""


class InstanceIdentitySection(IdentitySection):
    mental_age: int = 0


class InstanceDemographicsSection(DemographicsSection):
    physical_presence: PhysicalSection = Field(default_factory=PhysicalSection)


class CovenantSection(_Document):
    creator: str = ""
    relationship: str = ""
    works_with: tuple[str, ...] = ()
    serves: str = ""


class FullInstanceIdentity(_Document):
    """The full nested instance identity document."""

    biblical_foundation: BiblicalFoundationSection = Field(default_factory=BiblicalFoundationSection)
    identity: InstanceIdentitySection = Field(default_factory=InstanceIdentitySection)
    bio: BioSection = Field(default_factory=BioSection)
    demographics: InstanceDemographicsSection = Field(default_factory=InstanceDemographicsSection)
    personhood: PersonhoodSection = Field(default_factory=PersonhoodSection)
    resonates: ResonatesSection = Field(default_factory=ResonatesSection)
    thinking: ThinkingSection = Field(default_factory=ThinkingSection)
    personality: PersonalitySection = Field(default_factory=PersonalitySection)
    contact: ContactSection = Field(default_factory=ContactSection)
    workspace: WorkspaceSection = Field(default_factory=WorkspaceSection)
    covenant: CovenantSection = Field(default_factory=CovenantSection)
    preferences: PreferencesSection = Field(default_factory=PreferencesSection)
    growth: GrowthSection = Field(default_factory=GrowthSection)
    metadata: MetadataSection = Field(default_factory=MetadataSection)


# -- User document -----------------------------------------------------------


class UserDemographicsSection(DemographicsSection):
    physical_appearance: PhysicalSection = Field(default_factory=PhysicalSection)


# User social links are plain strings
class UserSocialSection(SocialSection):
    other: dict[str, str] = Field(default_factory=dict)


class UserContactSection(ContactSection):
    social: UserSocialSection = Field(default_factory=UserSocialSection)


class FaithSection(_Document):
    is_religious: bool = False
    tradition: str = ""
    denomination: str = ""
    practice_level: str = ""
    important_practices: tuple[str, ...] = ()
    communication_preferences: str = ""


class FullUserIdentity(_Document):
    """The full nested operator identity document."""

    identity: IdentitySection = Field(default_factory=IdentitySection)
    bio: BioSection = Field(default_factory=BioSection)
    demographics: UserDemographicsSection = Field(default_factory=UserDemographicsSection)
    faith: FaithSection = Field(default_factory=FaithSection)
    personhood: PersonhoodSection = Field(default_factory=PersonhoodSection)
    resonates: ResonatesSection = Field(default_factory=ResonatesSection)
    thinking: ThinkingSection = Field(default_factory=ThinkingSection)
    personality: PersonalitySection = Field(default_factory=PersonalitySection)
    contact: UserContactSection = Field(default_factory=UserContactSection)
    workspace: WorkspaceSection = Field(default_factory=WorkspaceSection)
    preferences: PreferencesSection = Field(default_factory=PreferencesSection)
    growth: GrowthSection = Field(default_factory=GrowthSection)
    metadata: MetadataSection = Field(default_factory=MetadataSection)


# -- Resolved (flat) view ----------------------------------------------------


class CreatorInfo(_Document):
    name: str = ""
    relationship: str = ""


class WorkspaceInfo(_Document):
    primary_path: str = ""


class UserView(_Document):
    """Operator fields flattened from the user document."""

    name: str = ""
    display_name: str = ""
    pronouns: str = ""
    age: int = 0
    is_religious: bool = False
    faith: str = ""
    denomination: str = ""
    practice_level: str = ""
    faith_comm_prefs: str = ""
    organization: str = ""
    role: str = ""
    calling: str = ""
    passions: tuple[str, ...] = ()
    work_style: str = ""
    timezone: str = ""


class ResolvedIdentity(_Document):
    """The one identity object consumers see.

    ``system_paths`` carries the bootstrap path table for components that
    need raw locations (session data, skills, ...).
    """

    name: str = ""
    emoji: str = ""
    tagline: str = ""
    pronouns: str = ""
    domain: str = ""
    calling_short: str = ""
    creator: CreatorInfo = Field(default_factory=CreatorInfo)
    user: UserView = Field(default_factory=UserView)
    workspace: WorkspaceInfo = Field(default_factory=WorkspaceInfo)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    system_paths: SystemPaths = Field(default_factory=SystemPaths)


# -- Diagnostics enums -------------------------------------------------------


class DegradationLevel(enum.Enum):
    FULL = "full"                              # bootstrap + instance + user
    USER_DEFAULTED = "user_defaulted"          # user fields hardcoded
    INSTANCE_DEFAULTED = "instance_defaulted"  # instance + user hardcoded
    ALL_DEFAULTED = "all_defaulted"            # nothing loaded


class DocumentError(enum.Enum):
    NOT_FOUND = "not_found"
    UNPARSEABLE = "unparseable"
