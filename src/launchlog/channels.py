"""
Record channels.

A channel tags how a record should be laid out, independent of its
severity:

    plain         rendered as-is (default for stdlib logging records)
    continuation  indented under the previous message with "    => "
    launch        startup announcement; emitted at error severity so it
                  always passes the gate, but rendered as info

Stdlib callers pick a channel through ``extra``::

    log.info("Mounting routes", extra={"channel": Channel.CONTINUATION})
"""

from enum import Enum


# Attribute name looked up on logging.LogRecord instances
CHANNEL_ATTR = 'channel'


class Channel(Enum):
    PLAIN = 'plain'
    CONTINUATION = 'continuation'
    LAUNCH = 'launch'


CHANNEL_DESCRIPTIONS = {
    Channel.PLAIN:        'Rendered as-is (stdlib logging default)',
    Channel.CONTINUATION: 'Indented under the previous message',
    Channel.LAUNCH:       'Startup announcement, always shown, styled as info',
}


def coerce_channel(value) -> Channel:
    """Turn a Channel, its string value, or None into a Channel.

    Unknown values fall back to PLAIN so a stray ``extra`` never
    breaks rendering.
    """
    if isinstance(value, Channel):
        return value
    try:
        return Channel(value)
    except ValueError:
        return Channel.PLAIN


def format_channel_list() -> str:
    """Format the list of channels for display.

    Returns:
        Formatted string listing all channels with descriptions.
    """
    lines = ["Available channels:"]
    max_name = max(len(ch.value) for ch in Channel)
    for ch in Channel:
        desc = CHANNEL_DESCRIPTIONS.get(ch, '')
        lines.append(f"  {ch.value:<{max_name}}  {desc}")
    return "\n".join(lines)
