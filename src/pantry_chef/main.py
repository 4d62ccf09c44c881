"""
Pantry Chef - CLI Entry Point.

Usage:
    pantry-chef login                 Sign in (session is remembered)
    pantry-chef pantry list           Show pantry items
    pantry-chef pantry add tomato     Add an ingredient
    pantry-chef recipes generate      Generate recipes from the pantry
    pantry-chef recipes saved         Show saved recipes
    pantry-chef serve                 Run the generate-recipes API
    pantry-chef --help                Show help
"""

import logging

import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table

from pantry_chef.models import Recipe

app = typer.Typer(
    name="pantry-chef",
    help="Pantry Chef - track your pantry and cook with what you have.",
    add_completion=False,
)
pantry_app = typer.Typer(help="Manage pantry ingredients.", add_completion=False)
recipes_app = typer.Typer(help="Generate and manage recipes.", add_completion=False)
app.add_typer(pantry_app, name="pantry")
app.add_typer(recipes_app, name="recipes")

console = Console()


# =============================================================================
# Wiring
# =============================================================================


def _load_auth():
    """Build the AuthContext and restore any saved session."""
    from pantry_chef.config import get_settings
    from pantry_chef.db.client import get_client
    from pantry_chef.session import AuthContext

    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"\n[red]FAIL Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with SUPABASE_URL and SUPABASE_ANON_KEY.[/dim]")
        raise typer.Exit(1)

    auth = AuthContext(get_client(), session_file=settings.session_file, notifier=_notifier())
    auth.restore()
    return auth


def _require_session():
    """Return (auth, row client) for a signed-in user, or exit."""
    from pantry_chef.db.client import get_authenticated_client

    auth = _load_auth()
    if not auth.is_authenticated:
        console.print("[red]Not signed in.[/red] Run [bold]pantry-chef login[/bold] first.")
        raise typer.Exit(1)
    return auth, get_authenticated_client(auth.session.access_token)


def _notifier():
    from pantry_chef.views import ConsoleNotifier

    return ConsoleNotifier(console)


def _print_recipe(recipe: Recipe, heading: str) -> None:
    body = f"[dim]{recipe.cooking_time}[/dim]\n\n" if recipe.cooking_time else ""
    if recipe.ingredients_used:
        body += "[bold]Ingredients:[/bold] " + ", ".join(recipe.ingredients_used) + "\n\n"
    body += "\n".join(f"{n}. {step}" for n, step in enumerate(recipe.steps, 1))
    console.print(Panel(body.rstrip(), title=heading, border_style="green", title_align="left"))


# =============================================================================
# Auth
# =============================================================================


@app.command()
def login(
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Sign in with email and password."""
    auth = _load_auth()
    result = auth.sign_in(email, password)
    if not result.ok:
        console.print(f"[bold red]Error[/bold red] {result.error}")
        raise typer.Exit(1)
    console.print(f"[green]Signed in as {auth.email}[/green]")


@app.command()
def signup(
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
) -> None:
    """Create an account."""
    auth = _load_auth()
    result = auth.sign_up(email, password)
    if not result.ok:
        console.print(f"[bold red]Error[/bold red] {result.error}")
        raise typer.Exit(1)
    if result.needs_confirmation:
        console.print("[bold green]Check your email[/bold green] We sent you a confirmation link.")
    else:
        console.print(f"[green]Signed in as {auth.email}[/green]")


@app.command()
def logout() -> None:
    """Sign out and forget the saved session."""
    auth = _load_auth()
    auth.sign_out()
    console.print("[dim]Signed out.[/dim]")


@app.command()
def whoami() -> None:
    """Show the signed-in user."""
    auth = _load_auth()
    if auth.is_authenticated:
        console.print(f"{auth.email or auth.user_id}")
    else:
        console.print("[dim]Not signed in.[/dim]")


# =============================================================================
# Pantry
# =============================================================================


def _pantry_view():
    from pantry_chef.db.stores import PantryStore
    from pantry_chef.views import PantryView

    auth, client = _require_session()
    return PantryView(PantryStore(client, auth.user_id), _notifier())


def _print_pantry(items, searching: bool) -> None:
    if not items:
        if searching:
            console.print("[dim]No ingredients match your search.[/dim]")
        else:
            console.print("[dim]Your pantry is empty. Add some ingredients![/dim]")
        return

    table = Table(title="My Pantry")
    table.add_column("ID", style="dim")
    table.add_column("Ingredient", style="bold")
    table.add_column("Quantity")
    for item in items:
        table.add_row(item.id, item.name, item.quantity or "")
    console.print(table)


@pantry_app.command("list")
def pantry_list(
    search: str = typer.Option("", "--search", "-s", help="Filter by name"),
) -> None:
    """Show pantry items, newest first."""
    view = _pantry_view()
    view.refresh()
    _print_pantry(view.search(search), searching=bool(search.strip()))


@pantry_app.command("add")
def pantry_add(
    name: str = typer.Argument(..., help="Ingredient name"),
    quantity: str = typer.Option("", "--quantity", "-q", help="Quantity (optional)"),
) -> None:
    """Add an ingredient to the pantry."""
    view = _pantry_view()
    if view.add(name, quantity) is None:
        raise typer.Exit(1)
    _print_pantry(view.items, searching=False)


@pantry_app.command("edit")
def pantry_edit(
    item_id: str = typer.Argument(..., help="Item ID"),
    name: str = typer.Option(..., "--name", "-n", help="New name"),
    quantity: str = typer.Option("", "--quantity", "-q", help="New quantity (blank clears it)"),
) -> None:
    """Change an ingredient's name and quantity."""
    view = _pantry_view()
    if view.update(item_id, name, quantity) is None:
        raise typer.Exit(1)
    _print_pantry(view.items, searching=False)


@pantry_app.command("remove")
def pantry_remove(item_id: str = typer.Argument(..., help="Item ID")) -> None:
    """Remove an ingredient from the pantry."""
    view = _pantry_view()
    if not view.delete(item_id):
        raise typer.Exit(1)


# =============================================================================
# Recipes
# =============================================================================


@recipes_app.command("generate")
def recipes_generate(
    save: bool = typer.Option(True, "--save/--no-save", help="Offer to save recipes afterwards"),
) -> None:
    """Generate vegetarian recipes from everything in the pantry."""
    from pantry_chef.config import get_settings
    from pantry_chef.db.stores import PantryStore, SavedRecipeStore
    from pantry_chef.views import RecipeGeneratorView, RecipeServiceClient

    auth, client = _require_session()
    with RecipeServiceClient(get_settings().recipe_function_url, auth.session.access_token) as service:
        view = RecipeGeneratorView(
            PantryStore(client, auth.user_id),
            SavedRecipeStore(client, auth.user_id),
            service,
            _notifier(),
        )

        view.load_ingredients()
        if view.pantry_items:
            console.print(f"[dim]Using {len(view.pantry_items)} ingredients from your pantry[/dim]")
        with Live(Spinner("dots", text="Generating recipes..."), console=console, transient=True):
            recipes = view.generate()
    if not recipes:
        raise typer.Exit(1)

    for n, recipe in enumerate(recipes, 1):
        _print_recipe(recipe, f"{n}. {recipe.title}")

    if not save:
        return
    choice = typer.prompt("Save which recipes? (e.g. 1,3 or blank for none)", default="", show_default=False)
    for part in choice.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= len(recipes):
            console.print(f"[yellow]Skipping '{part}'[/yellow]")
            continue
        view.save(recipes[int(part) - 1])


@recipes_app.command("saved")
def recipes_saved() -> None:
    """Show saved recipes, newest first."""
    from pantry_chef.db.stores import SavedRecipeStore
    from pantry_chef.views import SavedRecipesView

    auth, client = _require_session()
    view = SavedRecipesView(SavedRecipeStore(client, auth.user_id), _notifier())
    recipes = view.refresh()
    if not recipes:
        console.print("[dim]No saved recipes yet. Generate some and save your favorites![/dim]")
        return
    for recipe in recipes:
        _print_recipe(recipe, f"{recipe.title} [dim]({recipe.id})[/dim]")


@recipes_app.command("delete")
def recipes_delete(recipe_id: str = typer.Argument(..., help="Saved recipe ID")) -> None:
    """Delete a saved recipe."""
    from pantry_chef.db.stores import SavedRecipeStore
    from pantry_chef.views import SavedRecipesView

    auth, client = _require_session()
    view = SavedRecipesView(SavedRecipeStore(client, auth.user_id), _notifier())
    if not view.delete(recipe_id):
        raise typer.Exit(1)


# =============================================================================
# Service
# =============================================================================


@app.command()
def serve(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload for development"),
    log_prompts: bool = typer.Option(False, "--log-prompts", "-l", help="Log all LLM prompts to prompt_logs/"),
) -> None:
    """Start the generate-recipes API server."""
    import os

    import uvicorn

    from pantry_chef.config import get_core_settings
    from pantry_chef.llm.prompt_logger import enable_prompt_logging

    settings = get_core_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if log_prompts:
        enable_prompt_logging(True)

    actual_port = int(os.environ.get("PORT", port))

    console.print("\n[bold green]Pantry Chef API[/bold green]")
    console.print(f"Starting server on http://localhost:{actual_port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "pantry_chef.web.app:app",
        host="0.0.0.0",
        port=actual_port,
        reload=reload,
    )


@app.command()
def health() -> None:
    """Check configuration."""
    from pantry_chef.config import get_settings

    console.print("\n[bold]Pantry Chef Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("[green]OK[/green] Configuration loaded")
        console.print(f"   Environment: {settings.pantry_env}")
        console.print(f"   Log level: {settings.log_level}")
        console.print(f"   Model: {settings.ai_model}")

        if settings.ai_gateway_api_key:
            console.print("[green]OK[/green] AI gateway key configured")
        else:
            console.print("[yellow]WARN[/yellow] AI_GATEWAY_API_KEY not set (needed by `serve`)")

        console.print(f"[dim]INFO[/dim] Recipe service: {settings.recipe_function_url}")

        if not settings.supabase_url.startswith("https://"):
            console.print("[red]FAIL[/red] Supabase URL missing or invalid")
            raise typer.Exit(1)
        console.print("[green]OK[/green] Supabase URL configured")
        console.print("\n[green]All checks passed![/green]")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"\n[red]FAIL Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from pantry_chef import __version__

    console.print(f"Pantry Chef version {__version__}")


if __name__ == "__main__":
    app()
