"""
Channel config loading: from an already-parsed mapping, or from env.
"""
from chanlog.config.channels import ChannelSpec, load_channel_configs, load_channels_from_env

__all__ = [
    "ChannelSpec",
    "load_channel_configs",
    "load_channels_from_env",
]
