"""Flatten nested identity documents into the consumer-facing view.

The field table is fixed. Anything the documents do not carry (emoji,
tagline, domain, workspace path) stays at its zero value; the merger never
invents data.
"""

from kin_cli.identity import (
    BootstrapConfig,
    CreatorInfo,
    FullInstanceIdentity,
    FullUserIdentity,
    ResolvedIdentity,
    UserView,
)


def map_user(user: FullUserIdentity) -> UserView:
    return UserView(
        name=user.identity.name,
        display_name=user.identity.display_name,
        pronouns=user.identity.pronouns,
        age=user.identity.age,
        is_religious=user.faith.is_religious,
        faith=user.faith.tradition,
        denomination=user.faith.denomination,
        practice_level=user.faith.practice_level,
        faith_comm_prefs=user.faith.communication_preferences,
        organization=user.workspace.organization,
        role=user.workspace.role,
        calling=user.workspace.calling,
        passions=user.personhood.passions,
        work_style=user.personality.work_style,
        timezone=user.preferences.timezone,
    )


def merge_instance(
    bootstrap: BootstrapConfig,
    instance: FullInstanceIdentity,
    user_view: UserView,
) -> ResolvedIdentity:
    """Map bootstrap + instance fields, taking the user view as given."""
    return ResolvedIdentity(
        name=instance.identity.name,
        pronouns=instance.identity.pronouns,
        calling_short=instance.workspace.calling,
        creator=CreatorInfo(
            name=instance.covenant.creator,
            relationship=instance.covenant.relationship,
        ),
        user=user_view,
        display=bootstrap.display,
        system_paths=bootstrap.system_paths,
    )


def merge(
    bootstrap: BootstrapConfig,
    instance: FullInstanceIdentity,
    user: FullUserIdentity,
) -> ResolvedIdentity:
    """Merge all three loaded documents into a ResolvedIdentity."""
    return merge_instance(bootstrap, instance, map_user(user))
