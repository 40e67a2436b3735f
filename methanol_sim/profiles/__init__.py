from methanol_sim.profiles.library import BASELINE, REVISED, PROFILE_LIBRARY, get_profile

__all__ = ["BASELINE", "REVISED", "PROFILE_LIBRARY", "get_profile"]
