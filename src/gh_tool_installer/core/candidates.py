"""Candidate asset filename patterns.

Patterns go from most specific (tool, OS, architecture and tag) to least
specific (the bare tool name). Release tags are tried verbatim and, when
they parse as a version, without their ``v`` prefix.
"""

from packaging.version import InvalidVersion, Version

from gh_tool_installer.core.platform import PlatformDescriptor


def tag_variants(tag: str | None) -> list[str]:
    """Return the spellings of a release tag used in asset names.

    Args:
        tag: Release tag such as ``v1.2.0``

    Returns:
        The tag itself, followed by the bare version when it differs

    """
    if not tag:
        return []

    variants = [tag]
    try:
        Version(tag)
    except InvalidVersion:
        return variants

    bare = tag[1:] if tag[:1] in ("v", "V") else tag
    if bare != tag:
        variants.append(bare)
    return variants


def generate_candidates(
    tool: str,
    platform: PlatformDescriptor,
    tag: str | None = None,
) -> list[str]:
    """Generate ordered glob patterns for platform-specific assets.

    Args:
        tool: Canonical tool name
        platform: Target platform; must have a supported architecture
        tag: Release tag, when a release exists

    Returns:
        Unique patterns in priority order, ending with the bare tool name

    """
    os_name = platform.os_name
    arch = platform.arch
    patterns: list[str] = []

    if arch:
        for version in tag_variants(tag):
            patterns += [
                f"{tool}-{os_name}-{arch}-{version}",
                f"{tool}-{version}-{os_name}-{arch}",
                f"{tool}_{version}_{os_name}_{arch}",
                f"{tool}-{version}-{arch}-unknown-{os_name}-gnu",
            ]
        patterns += [
            f"{tool}-{os_name}-{arch}",
            f"{tool}_{os_name}_{arch}",
            f"{tool}-{arch}-{os_name}",
            f"{tool}-{arch}-unknown-{os_name}-gnu",
            f"{tool}-{arch}-unknown-{os_name}-musl",
        ]

    patterns += [f"{tool}-{os_name}", tool]

    # dict preserves insertion order
    return list(dict.fromkeys(patterns))
