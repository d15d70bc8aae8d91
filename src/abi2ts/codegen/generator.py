"""Generates the TypeScript declarations for one output unit.

``TypeScriptGenerator`` pairs each fragment's identifier with its rendered
object literal and appends the ``export default`` list of the unit.
"""
import logging
from collections import Counter
from typing import Iterable, List, Optional, Tuple

from abi2ts.codegen.literal import create_literal_for
from abi2ts.types import Fragment

logger = logging.getLogger(__name__)


class TypeScriptGenerator:
    """Turns ABI fragments into exported TypeScript ``as const`` declarations."""

    @staticmethod
    def generate_fragment_declaration(
        fragment: Fragment,
        use_explicit_identifier: bool,
    ) -> Tuple[str, str]:
        """
        Build the exported constant declaration for a single fragment.

        Args:
            fragment: The fragment to declare.
            use_explicit_identifier: Qualify the identifier with the input types.

        Returns:
            A tuple of (identifier, declaration text).

        Raises:
            MissingNameError: If the fragment has no usable name.
            SerializationError: If the fragment cannot be rendered as a literal.
        """
        identifier = fragment.identifier(use_explicit_identifier)
        object_literal = create_literal_for(fragment.to_structured())
        declaration = f"export const {identifier} = {object_literal} as const;"
        return identifier, declaration

    @classmethod
    def generate_file_content(cls, fragments: Iterable[Fragment]) -> Optional[str]:
        """
        Generate the full content of one output unit.

        Workflow:
          1. Drop fragments without a name.
          2. Count names to find overloads sharing a name.
          3. Walk fragments in order, dropping later duplicates by unique key.
          4. Declare each survivor, using type-qualified identifiers for overloads.
          5. Append an ``export default`` list of all identifiers.

        Args:
            fragments: Fragments of one output unit, in encounter order.

        Returns:
            The file content, or None when there is nothing to generate.

        Raises:
            SerializationError: If a surviving fragment cannot be rendered.
        """
        named = [fragment for fragment in fragments if fragment.has_name]
        if not named:
            return None

        name_counts = Counter(fragment.name for fragment in named)

        identifiers: List[str] = []
        declarations: List[str] = []
        seen_keys = set()

        for fragment in named:
            key = fragment.get_unique_key()
            if key in seen_keys:
                logger.debug("Skipping duplicate fragment %s", key)
                continue
            seen_keys.add(key)

            identifier, declaration = cls.generate_fragment_declaration(
                fragment,
                use_explicit_identifier=name_counts[fragment.name] > 1,
            )
            identifiers.append(identifier)
            declarations.append(declaration)

        if not identifiers:
            return None

        export_default = f"export default [{', '.join(identifiers)}] as const;"
        return "\n\n".join(declarations + [export_default])
