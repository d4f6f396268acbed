"""Arc sampling: origin pose + half angle + shot count -> fire points."""

from projectile_arc.sampling.arc import ArcSampler, sample_arc
from projectile_arc.sampling.provider import StaticPoseProvider

__all__ = ["ArcSampler", "StaticPoseProvider", "sample_arc"]
