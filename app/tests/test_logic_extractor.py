from __future__ import annotations

from unittest import TestCase

from resource_lint.extract import (
    extract_logic_references,
    find_lookup_arguments,
    find_service_names,
)
from resource_lint.models import RawReference, SourceFile

COMPONENT_SOURCE = """
import { SkyAppResourcesService } from '@skyux/i18n';

export class GreetingComponent {
  constructor(
    private resources: SkyAppResourcesService,
    private libResources:SkyLibResourcesService
  ) {}

  public load(count: number): void {
    this.resources.getString('greeting_text').subscribe();
    this.resources.getString(
      'count_msg',
      count
    ).subscribe();
    this.libResources.getString(this.dynamicKey).subscribe();
  }
}
"""


class ServiceNameDiscoveryTests(TestCase):
    def test_finds_names_for_both_service_types(self) -> None:
        self.assertEqual(
            find_service_names(COMPONENT_SOURCE), ["resources", "libResources"]
        )

    def test_allows_no_space_after_colon(self) -> None:
        self.assertEqual(find_service_names("svc:SkyAppResourcesService"), ["svc"])

    def test_ignores_other_types(self) -> None:
        self.assertEqual(find_service_names("svc: SkyAppWindowRef"), [])

    def test_empty_contents_yield_nothing(self) -> None:
        self.assertEqual(find_service_names(""), [])

    def test_duplicate_bindings_are_reported_once(self) -> None:
        contents = "svc: SkyAppResourcesService;\nsvc: SkyAppResourcesService;"
        self.assertEqual(find_service_names(contents), ["svc"])


class LookupArgumentTests(TestCase):
    def test_single_literal_argument(self) -> None:
        contents = "svc.getString('greeting_text')"
        self.assertEqual(find_lookup_arguments(contents, "svc"), ["'greeting_text'"])

    def test_interpolation_arguments_are_dropped(self) -> None:
        contents = "svc.getString('count_msg', count)"
        self.assertEqual(find_lookup_arguments(contents, "svc"), ["'count_msg'"])

    def test_call_spanning_lines(self) -> None:
        contents = "svc.getString(\n  'wrapped_key'\n)"
        self.assertEqual(
            find_lookup_arguments(contents, "svc"), ["\n  'wrapped_key'\n"]
        )

    def test_name_is_matched_literally(self) -> None:
        contents = "svcXgetString('nope') svc?.getString('also_nope')"
        self.assertEqual(find_lookup_arguments(contents, "svc"), [])

    def test_unused_service_contributes_nothing(self) -> None:
        self.assertEqual(find_lookup_arguments("const x = 1;", "svc"), [])


class LogicExtractionTests(TestCase):
    def test_pools_references_from_every_service_name(self) -> None:
        files = [SourceFile("greeting.component.ts", COMPONENT_SOURCE)]

        references = extract_logic_references(files)

        self.assertEqual(
            [reference.token.strip() for reference in references],
            ["'greeting_text'", "'count_msg'", "this.dynamicKey"],
        )
        self.assertTrue(
            all(ref.file_name == "greeting.component.ts" for ref in references)
        )

    def test_file_without_service_contributes_nothing(self) -> None:
        files = [
            SourceFile("plain.ts", "svc.getString('greeting_text')"),
            SourceFile("unreadable.ts", ""),
        ]
        self.assertEqual(extract_logic_references(files), [])

    def test_simple_declaration(self) -> None:
        contents = "svc: SkyAppResourcesService\nsvc.getString('greeting_text')"
        self.assertEqual(
            extract_logic_references([SourceFile("a.ts", contents)]),
            [RawReference("a.ts", "'greeting_text'")],
        )
