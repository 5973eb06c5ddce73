"""
Command-line interface.

    pwstrength analyze              # prompts without echo
    pwstrength analyze --json 'P@ssw0rd'
    pwstrength generate --length 20 --require-each --analyze
"""
import json

import click

from pwstrength.analyzer import analyze_password
from pwstrength.errors import PasswordToolError, ValidationError
from pwstrength.generator import MAX_LENGTH, MIN_LENGTH, generate_passwords
from pwstrength.models import AnalysisResult, GeneratorOptions
from pwstrength.password_utils import analyze


def _print_analysis(analysis: AnalysisResult) -> None:
    click.echo(f"Strength:          {analysis.strength_label} ({analysis.score}/100)")
    click.echo(f"Length:            {analysis.length}")
    click.echo(f"Character set:     {analysis.character_set_size}")
    click.echo(f"Raw entropy:       {analysis.raw_entropy_bits:.1f} bits")
    click.echo(f"Penalties:         {analysis.penalties_bits:.1f} bits")
    click.echo(f"Effective entropy: {analysis.effective_entropy_bits:.1f} bits")

    if analysis.detected_patterns:
        click.echo("\nPatterns:")
        for p in analysis.detected_patterns:
            click.echo(f"  - {p.message} (-{p.penalty_bits} bits)")

    click.echo("\nTime to crack (estimate, not an exact duration):")
    for scenario in analysis.crack_times:
        click.echo(f"  {scenario.label:<20} {scenario.formatted_time}")

    click.echo("\nSuggestions:")
    for s in analysis.suggestions:
        click.echo(f"  - {s}")


@click.group()
def main():
    """Educational password strength estimator and generator."""


@main.command('analyze')
@click.argument('password', required=False)
@click.option('--json', 'as_json', is_flag=True, help='Print the analysis as JSON.')
def analyze_command(password, as_json):
    """Analyse PASSWORD (prompted for when omitted)."""
    if password is None:
        password = click.prompt('Password', hide_input=True)
    try:
        analysis = analyze(password)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint='PASSWORD')

    if as_json:
        click.echo(json.dumps(analysis.to_dict(), indent=2))
    else:
        _print_analysis(analysis)


@main.command('generate')
@click.option('--length', '-l', default=16, show_default=True,
              type=click.IntRange(MIN_LENGTH, MAX_LENGTH))
@click.option('--lower/--no-lower', default=True, show_default=True)
@click.option('--upper/--no-upper', default=True, show_default=True)
@click.option('--digits/--no-digits', default=True, show_default=True)
@click.option('--symbols/--no-symbols', default=True, show_default=True)
@click.option('--exclude-ambiguous', is_flag=True, help='Leave out O, 0, l, 1 and I.')
@click.option('--no-repeats', is_flag=True, help='Never draw the same character twice in a row.')
@click.option('--require-each', is_flag=True, help='Include at least one character of every selected class.')
@click.option('--count', '-n', default=1, show_default=True, type=click.IntRange(1, 100))
@click.option('--analyze', 'with_analysis', is_flag=True, help='Also print an analysis of each password.')
def generate_command(length, lower, upper, digits, symbols, exclude_ambiguous,
                     no_repeats, require_each, count, with_analysis):
    """Generate random passwords from the system's secure random source."""
    options = GeneratorOptions(
        length=length,
        include_lowercase=lower,
        include_uppercase=upper,
        include_digits=digits,
        include_symbols=symbols,
        exclude_ambiguous=exclude_ambiguous,
        no_repeats=no_repeats,
        require_each_selected_type=require_each,
    )
    try:
        passwords = generate_passwords(options, count)
    except ValidationError as e:
        raise click.UsageError(str(e))
    except PasswordToolError as e:
        raise click.ClickException(str(e))

    for pwd in passwords:
        click.echo(pwd)
        if with_analysis:
            analysis = analyze_password(pwd)
            click.echo(f"  {analysis.strength_label} ({analysis.score}/100), "
                       f"{analysis.effective_entropy_bits:.1f} bits effective\n")


if __name__ == '__main__':
    main()
