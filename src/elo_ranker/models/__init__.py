from elo_ranker.models.participant import Pairing, Participant

__all__ = ["Pairing", "Participant"]
