"""
main.py — Play a duel end to end
================================

Walks two players through a timed duel using an in-memory word list,
then prints the boards and the leaderboard.

    python main.py

The service will:
  1. Register Alice's challenge and Bob's invite
  2. Start the duel when Bob answers with his own word
  3. Score the duel when both sides have finished
  4. Post the final scores to the leaderboard
"""

import logging
from worduel import CleanupWorker, Dictionary, GameVariant, WorduelService, setup_logging

# ── Setup logging (so you can see what's happening) ──
setup_logging(None, logging.INFO)

# ── Words both players may use ──
dictionary = Dictionary([
    "north", "slide", "tower", "lease", "plumb", "crane", "ghost", "dwarf",
])

service = WorduelService(dictionary=dictionary)

# ── Optional: sweep expired invites and duels in the background ──
worker = CleanupWorker(service)
worker.start()

# ── Alice picks 'north' for Bob; Bob picks 'slide' for Alice ──
service.challenge("alice", "bob", GameVariant.TIMED, "north")
service.accept_invite("bob", "alice", GameVariant.TIMED, "slide")

for word in ["tower", "lease", "slide"]:
    report = service.guess("alice", GameVariant.TIMED, word)
print(report.views)
print(report.state_line)
print(service.keyboard("bob", GameVariant.TIMED))

for word in ["crane", "north"]:
    report = service.guess("bob", GameVariant.TIMED, word)
print(report.views)
print(report.state_line)

print("Leaderboard:", service.scores.list_top(10))
worker.stop()
