"""
Bulldog - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive InvalidConfiguration
(or roster size) exceptions.
"""

from bulldog.engine.errors import InvalidConfiguration, RosterTooLarge, RosterTooSmall


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{what} must be an integer, got {type(value).__name__}.")
    return value


def validate_sides(sides: int) -> int:
    """
    Validate the number of faces on a die.

    Args:
        sides: Number of faces

    Returns:
        Validated sides

    Raises:
        InvalidConfiguration: If sides is not a positive integer
    """
    _require_int(sides, "Die sides")
    if sides < 1:
        raise InvalidConfiguration(f"Die must have at least one side, got {sides}.")
    return sides


def validate_bust_face(face: int, sides: int) -> int:
    """
    Validate the bust face against the die it belongs to.

    Raises:
        InvalidConfiguration: If face is not between 1 and sides
    """
    _require_int(face, "Bust face")
    if not (1 <= face <= sides):
        raise InvalidConfiguration(
            f"Bust face {face} is out of range. Must be between 1 and {sides}."
        )
    return face


def validate_target_score(score: int) -> int:
    """
    Validate target score for a game.

    Args:
        score: Target score to validate

    Returns:
        Validated score

    Raises:
        InvalidConfiguration: If score is not a positive integer
    """
    _require_int(score, "Target score")
    if score <= 0:
        raise InvalidConfiguration(f"Target score must be positive, got {score}.")
    return score


def validate_threshold(threshold: int, name: str = "Threshold") -> int:
    """Validate a strategy's stopping threshold (positive integer)."""
    _require_int(threshold, name)
    if threshold <= 0:
        raise InvalidConfiguration(f"{name} must be positive, got {threshold}.")
    return threshold


def validate_probability(probability: float, name: str = "Probability") -> float:
    """
    Validate a probability.

    Raises:
        InvalidConfiguration: If probability is not within [0, 1]
    """
    if isinstance(probability, bool) or not isinstance(probability, (int, float)):
        raise InvalidConfiguration(
            f"{name} must be a number, got {type(probability).__name__}."
        )
    if not (0.0 <= probability <= 1.0):
        raise InvalidConfiguration(f"{name} must be between 0 and 1, got {probability}.")
    return float(probability)


def validate_player_bounds(min_players: int, max_players: int) -> tuple[int, int]:
    """Validate the configured roster size bounds."""
    _require_int(min_players, "Minimum players")
    _require_int(max_players, "Maximum players")
    if min_players < 2:
        raise InvalidConfiguration(f"A game needs at least 2 players, got {min_players}.")
    if max_players < min_players:
        raise InvalidConfiguration(
            f"Maximum players ({max_players}) is below minimum players ({min_players})."
        )
    return min_players, max_players


def validate_player_count(count: int, min_players: int, max_players: int) -> int:
    """
    Validate number of players.

    Args:
        count: Number of players
        min_players: Smallest allowed roster
        max_players: Largest allowed roster

    Returns:
        Validated count

    Raises:
        RosterTooSmall: If count is below min_players
        RosterTooLarge: If count is above max_players
    """
    if count < min_players:
        raise RosterTooSmall(
            f"Player count must be {min_players}-{max_players}, got {count}."
        )
    if count > max_players:
        raise RosterTooLarge(
            f"Player count must be {min_players}-{max_players}, got {count}."
        )
    return count


def validate_game_die(sides: int) -> int:
    """
    Validate a die for play: with a single face every roll busts and
    no score can ever grow.

    Raises:
        InvalidConfiguration: If sides is below 2
    """
    validate_sides(sides)
    if sides < 2:
        raise InvalidConfiguration(f"A game needs a die with at least 2 sides, got {sides}.")
    return sides
