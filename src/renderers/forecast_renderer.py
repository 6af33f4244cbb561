"""Plain-text rendering of battle forecasts and hit-rate tables."""
from ..core.data import RNSystem, RN_SYSTEM_NAMES
from ..core.hit_rates import true_hit_table
from ..game.combat.forecast import BattleForecast


def _boxed(text: str, width: int) -> str:
    """Pad a line to fit inside a box of the given width."""
    line = f'│ {text}'
    return line[:width - 1].ljust(width - 1) + '│'


def render_forecast(forecast: BattleForecast, attacker_name: str = "Attacker",
                    defender_name: str = "Defender", width: int = 36,
                    max_rows: int = 10) -> list[str]:
    """Render a forecast popup as a list of box-drawn lines.

    Args:
        forecast: The forecast to render
        attacker_name: Label for the attacking side
        defender_name: Label for the defending side
        width: Total popup width including borders
        max_rows: Most likely outcomes to list before summarizing the rest
    """
    lines = []
    lines.append('┌' + '─' * (width - 2) + '┐')
    lines.append(_boxed('Battle Forecast', width))
    lines.append('├' + '─' * (width - 2) + '┤')
    lines.append(_boxed(f'{attacker_name} ▶ {defender_name}', width))
    lines.append(_boxed(f'HP: {forecast.attacker_start_hp} vs {forecast.defender_start_hp}', width))
    lines.append(_boxed(f'Kill: {forecast.defender_death_chance:.2%}  '
                        f'Die: {forecast.attacker_death_chance:.2%}', width))
    lines.append(_boxed(f'Avg HP: {forecast.expected_attacker_hp:.1f} / '
                        f'{forecast.expected_defender_hp:.1f}', width))
    lines.append('├' + '─' * (width - 2) + '┤')

    for outcome in forecast.outcomes[:max_rows]:
        lines.append(_boxed(f'{outcome.attacker_hp:>3} / {outcome.defender_hp:<3} '
                            f'{outcome.probability:8.3%}', width))

    hidden = forecast.outcomes[max_rows:]
    if hidden:
        rest = sum(o.probability for o in hidden)
        lines.append(_boxed(f'+{len(hidden)} more  {rest:8.3%}', width))

    lines.append('└' + '─' * (width - 2) + '┘')
    return lines


def render_true_hit_table(system: RNSystem, step: int = 5) -> list[str]:
    """Render listed vs true hit rates for a randomness system."""
    table = true_hit_table(system)
    lines = [f'{RN_SYSTEM_NAMES[system]} true hit rates', 'Listed  True']
    for listed in range(0, 101, step):
        lines.append(f'{listed:>6}  {table[listed] * 100:6.2f}')
    return lines
