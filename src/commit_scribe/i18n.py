"""Locale table used to localise the example commit in the main prompt."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Translation:
    local_language: str
    commit_feat: str
    commit_description: str


TRANSLATIONS: dict[str, Translation] = {
    "en": Translation(
        local_language="english",
        commit_feat="feat(server.ts): add support for process.env.PORT environment variable",
        commit_description=(
            "The port variable is now named PORT, which improves consistency with the "
            "naming conventions as PORT is a constant. Support for an environment "
            "variable allows the application to be more flexible as it can now run on "
            "any available port specified via the process.env.PORT environment variable."
        ),
    ),
    "de": Translation(
        local_language="german",
        commit_feat="feat(server.ts): Unterstützung für die Umgebungsvariable process.env.PORT hinzugefügt",
        commit_description=(
            "Die Port-Variable heißt jetzt PORT, was die Konsistenz mit den "
            "Namenskonventionen verbessert, da PORT eine Konstante ist. Die Umgebungsvariable "
            "erlaubt es, die Anwendung auf jedem über process.env.PORT angegebenen Port "
            "auszuführen."
        ),
    ),
    "fr": Translation(
        local_language="french",
        commit_feat="feat(server.ts): ajouter la prise en charge de la variable d'environnement process.env.PORT",
        commit_description=(
            "La variable port s'appelle désormais PORT, ce qui respecte mieux les "
            "conventions de nommage puisque PORT est une constante. La variable "
            "d'environnement permet de lancer l'application sur n'importe quel port "
            "indiqué par process.env.PORT."
        ),
    ),
    "es": Translation(
        local_language="spanish",
        commit_feat="feat(server.ts): añadir soporte para la variable de entorno process.env.PORT",
        commit_description=(
            "La variable port ahora se llama PORT, lo que mejora la coherencia con las "
            "convenciones de nombres ya que PORT es una constante. La variable de entorno "
            "permite ejecutar la aplicación en cualquier puerto indicado por process.env.PORT."
        ),
    ),
}

DEFAULT_LOCALE = "en"


def resolve_locale(value: str) -> str | None:
    """Map a locale code or language name (``"de"``, ``"German"``) to a known code."""
    key = value.strip().lower().replace("-", "_")
    if key in TRANSLATIONS:
        return key
    for code, translation in TRANSLATIONS.items():
        if translation.local_language == key:
            return code
    return None


def get_translation(locale: str) -> Translation:
    return TRANSLATIONS.get(resolve_locale(locale) or DEFAULT_LOCALE, TRANSLATIONS[DEFAULT_LOCALE])
