"""Path routing — maps a virtual picker path onto the listing it shows."""

from __future__ import annotations

from github_picker.domain.value_objects import (
    BRANCHES_SEGMENT,
    TAGS_SEGMENT,
    ListingFeatures,
    ListingKind,
    ListingRequest,
    VirtualPath,
)

_DEFAULT_FEATURES = ListingFeatures()


def route(path: VirtualPath, features: ListingFeatures = _DEFAULT_FEATURES) -> ListingRequest:
    """Return the listing request for *path*.

    Pure: never touches the network and never raises.  Unknown shapes route
    to :attr:`ListingKind.EMPTY`.
    """
    segments = path.segments

    if not segments:
        return ListingRequest(ListingKind.REPOSITORIES)

    repository = segments[0]

    if len(segments) == 1:
        if features.include_meta_folders:
            return ListingRequest(ListingKind.META_FOLDERS, repository)
        return ListingRequest(ListingKind.TAGS, repository)

    if len(segments) == 2:
        if segments[1] == TAGS_SEGMENT:
            return ListingRequest(ListingKind.TAGS, repository)
        if segments[1] == BRANCHES_SEGMENT and features.include_branches:
            return ListingRequest(ListingKind.BRANCHES, repository)

    return ListingRequest(ListingKind.EMPTY, repository)
