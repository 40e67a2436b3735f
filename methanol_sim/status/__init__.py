from methanol_sim.status.classifier import classify_status, status_reasons

__all__ = ["classify_status", "status_reasons"]
