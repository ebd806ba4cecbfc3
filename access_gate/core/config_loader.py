"""
Core - Config Loader Implementation
Charge la configuration YAML et la valide.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .interfaces import GateConfig


class ConfigIntegrityError(Exception):
    """Erreur d'intégrité de configuration."""

    pass


class ConfigLoader:
    """Chargement de la configuration depuis un fichier YAML."""

    def __init__(self, configs_path: Union[str, Path] = "configs"):
        self.configs_path = Path(configs_path)

    def load(self, name: str) -> GateConfig:
        """
        Charge `<configs_path>/<name>.yaml`.

        Args:
            name: Nom de la configuration

        Returns:
            GateConfig validée

        Raises:
            ConfigIntegrityError: Fichier inexistant, YAML invalide ou structure invalide
        """
        config_file = self.configs_path / f"{name}.yaml"

        if not config_file.exists():
            raise ConfigIntegrityError(f"Configuration non trouvée: {name}")

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigIntegrityError(f"Erreur de parsing YAML: {e}")
        except OSError as e:
            raise ConfigIntegrityError(f"Erreur de lecture fichier: {e}")

        return self.parse(raw)

    def parse(self, raw: Any) -> GateConfig:
        """
        Valide une configuration déjà décodée.

        Raises:
            ConfigIntegrityError: Structure invalide
        """
        if not isinstance(raw, dict):
            raise ConfigIntegrityError("Configuration doit être un objet YAML")

        if "version" not in raw:
            raise ConfigIntegrityError("Champ obligatoire manquant: version")

        try:
            return GateConfig.model_validate(self._stringify_version(raw))
        except ValidationError as e:
            raise ConfigIntegrityError(f"Configuration invalide: {e}")

    @staticmethod
    def _stringify_version(raw: Dict[str, Any]) -> Dict[str, Any]:
        # `version: 1.0` est lu comme un float par YAML
        if isinstance(raw.get("version"), (int, float)):
            return {**raw, "version": str(raw["version"])}
        return raw
