"""
Template loading and rendering utilities using Jinja2.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

# Templates shipped inside the package
DEFAULT_TEMPLATES = Path(__file__).parent.parent / "templates"


class TemplateLoader:
    """
    Loads and renders Jinja2 templates.

    Supports a user template directory with fallback to the packaged defaults.
    """

    def __init__(self, templates_dir: Path | None = None):
        """
        Initialize template loader.

        Args:
            templates_dir: Optional directory whose templates take precedence
        """
        self.custom_templates = Path(templates_dir) if templates_dir else None
        self.default_templates = DEFAULT_TEMPLATES
        self._env: Environment | None = None
        self._template_cache: dict[str, Template] = {}

    def has_custom_templates(self) -> bool:
        """Check if a custom template directory is configured and present."""
        return self.custom_templates is not None and self.custom_templates.is_dir()

    @property
    def env(self) -> Environment:
        """
        Get or create Jinja2 environment (cached).

        Returns:
            Cached Jinja2 Environment configured for template loading
        """
        if self._env is None:
            template_dirs = []

            if self.has_custom_templates():
                template_dirs.append(str(self.custom_templates))

            if self.default_templates.exists():
                template_dirs.append(str(self.default_templates))

            if not template_dirs:
                raise FileNotFoundError("No template directories found")

            # Generated source is not HTML, so no autoescaping
            self._env = Environment(
                loader=FileSystemLoader(template_dirs),
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
                undefined=StrictUndefined,
                autoescape=False,
            )

        return self._env

    def get_template_path(self, template_name: str) -> Path:
        """
        Get path to template file, preferring the custom directory over defaults.

        Args:
            template_name: Template name (e.g., "component.j2")

        Returns:
            Path to template file
        """
        if self.has_custom_templates():
            custom_template = self.custom_templates / template_name
            if custom_template.exists():
                return custom_template

        default_template = self.default_templates / template_name
        if default_template.exists():
            return default_template

        raise FileNotFoundError(f"Template '{template_name}' not found in custom or defaults")

    def load_template(self, template_name: str) -> Template:
        """
        Load a Jinja2 template with caching.

        Args:
            template_name: Template name (e.g., "component.j2")

        Returns:
            Cached Jinja2 Template object
        """
        if template_name not in self._template_cache:
            # Verify template exists (will raise if not found)
            self.get_template_path(template_name)
            self._template_cache[template_name] = self.env.get_template(template_name)

        return self._template_cache[template_name]

    def render(self, template_name: str, context: dict) -> str:
        """
        Render a template to a string.

        Args:
            template_name: Template name (e.g., "component.j2")
            context: Dictionary of template variables

        Returns:
            Rendered text
        """
        return self.load_template(template_name).render(**context)
