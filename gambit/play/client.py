"""Client for the gambit HTTP server."""

from typing import Any, Dict, Optional

import httpx

from .models import GameStats


class GambitClient:
    """
    HTTP client for the gambit server.

    Example usage:
        client = GambitClient("http://localhost:8000")
        state = client.new_game(difficulty="hard")
        state = client.move("e2e4")
        print(f"Computer answered {state.last_move}")

        client.close()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: URL of the gambit server
            timeout: Request timeout in seconds
            client: Preconfigured httpx client to send requests with
        """
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def engine_move(self, fen: str, difficulty: str = "medium") -> Optional[str]:
        """
        Ask the engine for a move without touching the game session.

        Args:
            fen: Position in FEN notation
            difficulty: "easy", "medium" or "hard"

        Returns:
            Move in UCI format, None if the position has no legal move
        """
        payload = {"fen": fen, "difficulty": difficulty}
        response = self._client.post(f"{self.base_url}/engine-move", json=payload)
        response.raise_for_status()
        return response.json()["move"]

    def new_game(
        self,
        mode: str = "ai",
        difficulty: str = "medium",
        fen: Optional[str] = None,
    ) -> GameStats:
        """
        Start a new game on the server.

        Args:
            mode: "ai" to play the computer, "friend" for two humans
            difficulty: "easy", "medium" or "hard"
            fen: Starting position in FEN notation (optional)

        Returns:
            State of the new game
        """
        payload: Dict[str, Any] = {"mode": mode, "difficulty": difficulty}
        if fen is not None:
            payload["fen"] = fen

        response = self._client.post(f"{self.base_url}/game/new", json=payload)
        response.raise_for_status()
        return self._parse_stats(response.json())

    def move(self, move: str) -> GameStats:
        """Play a move (UCI or SAN), the computer answers in ai mode."""
        response = self._client.post(f"{self.base_url}/game/move", json={"move": move})
        response.raise_for_status()
        return self._parse_stats(response.json())

    def ai_move(self) -> GameStats:
        response = self._client.post(f"{self.base_url}/game/ai-move")
        response.raise_for_status()
        return self._parse_stats(response.json())

    def game(self) -> GameStats:
        """Get the current game state."""
        response = self._client.get(f"{self.base_url}/game")
        response.raise_for_status()
        return self._parse_stats(response.json())

    def health(self) -> bool:
        """
        Check if the server is healthy.

        Returns:
            True if server is responding
        """
        try:
            response = self._client.get(f"{self.base_url}/health")
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _parse_stats(self, data: Dict[str, Any]) -> GameStats:
        return GameStats(
            fen=data["fen"],
            status=data["status"],
            turn=data["turn"],
            in_check=data.get("in_check", False),
            history=data.get("history", []),
            winner=data.get("winner"),
            last_move=data.get("last_move"),
            legal_moves=data.get("legal_moves", []),
        )


# Convenience function for quick usage
def make_client(base_url: str = "http://localhost:8000") -> GambitClient:
    """
    Create a gambit client.

    Args:
        base_url: URL of the gambit server

    Returns:
        GambitClient instance
    """
    return GambitClient(base_url)
