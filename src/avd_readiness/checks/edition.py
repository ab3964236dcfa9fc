"""Edition check.

Decides whether the OS edition can become a virtual desktop image. Two
identification schemes are reconciled:

- EditionID (registry string): stable across localized builds, preferred.
- OperatingSystemSKU (number): fallback when the registry lookup failed.

Either signal may be missing; a missing signal never decides the outcome
on its own, the other one still can.
"""

from collections.abc import Collection

from avd_readiness.checks import BaseCheck, CheckContext, register_check
from avd_readiness.model.inventory import OsFingerprint
from avd_readiness.model.result import CheckResult


@register_check
class EditionClassifier(BaseCheck):
    """Classifies the OS edition as supported or unsupported."""

    order = 20

    @property
    def name(self) -> str:
        return "os-edition"

    def run(self, context: CheckContext) -> CheckResult:
        return self.evaluate(
            context.fingerprint,
            context.config.supported_skus,
            context.config.supported_edition_ids,
        )

    def evaluate(
        self,
        fp: OsFingerprint,
        supported_skus: Collection[int],
        supported_edition_ids: Collection[str],
    ) -> CheckResult:
        """Apply the rules in precedence order; first match wins."""
        edition_id = fp.edition_id or ""

        if edition_id and edition_id in supported_edition_ids:
            return CheckResult(
                name=self.name,
                passed=True,
                detail_message=f"Supported OS edition '{edition_id}'",
            )

        if fp.has_sku and fp.sku_code in supported_skus:
            return CheckResult(
                name=self.name,
                passed=True,
                detail_message=(
                    f"Supported OS SKU {fp.sku_code} "
                    f"(EditionID '{edition_id}' not recognized)"
                ),
            )

        message = f"Unsupported OS edition: EditionID='{edition_id}', SKU={fp.sku_label}"
        if fp.caption:
            message += f", Caption='{fp.caption}'"
        return CheckResult(name=self.name, passed=False, detail_message=message)
