"""Tests for module scaffolding (src.scaffolder.generator).

Covers:
- The directory skeleton and the seven generated files, in write order
- Singularized model naming and table names
- Namespace handling (default and custom)
- Refusal to touch an existing module
- Partial output when a stub is missing
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.config import Config, ModuleOptions
from src.scaffolder.errors import ModuleAlreadyExists, TemplateNotFound
from src.scaffolder.filesystem import MemoryFilesystem
from src.scaffolder.generator import MODULE_DIRECTORIES, ModuleGenerator
from src.scaffolder.templates import find_placeholders

APP_ROOT = Path("/app")

pytestmark = pytest.mark.unit


EXPECTED_FILES = [
    "composer.json",
    "src/Providers/PostsServiceProvider.php",
    "src/Routes/api.php",
    "config/posts.php",
    "src/Http/Controllers/ApiController.php",
    "src/Models/Post.php",
    "src/Http/Middleware/PostsMiddleware.php",
]


@pytest.fixture
def generator(config: Config, memory_fs: MemoryFilesystem) -> ModuleGenerator:
    return ModuleGenerator(config, filesystem=memory_fs)


class TestModuleGenerator:
    def test_writes_seven_files_in_order(
        self, generator: ModuleGenerator, config: Config, memory_fs: MemoryFilesystem
    ) -> None:
        result = generator.generate(ModuleOptions(name="Posts"))
        root = config.module_path("Posts")

        assert result.paths == [root / rel for rel in EXPECTED_FILES]
        assert memory_fs.writes == result.paths

    def test_creates_directory_skeleton(
        self, generator: ModuleGenerator, config: Config, memory_fs: MemoryFilesystem
    ) -> None:
        result = generator.generate(ModuleOptions(name="Posts"))
        root = config.module_path("Posts")

        for rel in MODULE_DIRECTORIES:
            assert memory_fs.is_dir(root / rel), rel
        assert len(result.directories) == len(MODULE_DIRECTORIES)

    def test_model_is_singular_with_plural_table(
        self, generator: ModuleGenerator, config: Config, memory_fs: MemoryFilesystem
    ) -> None:
        generator.generate(ModuleOptions(name="Posts"))
        model = memory_fs.read_text(config.module_path("Posts") / "src/Models/Post.php")

        assert "class Post extends Model" in model
        assert "protected ?string $table = 'posts';" in model

    def test_no_placeholder_left_unrendered(self, generator: ModuleGenerator) -> None:
        result = generator.generate(ModuleOptions(name="Posts"))
        for generated in result.files:
            assert find_placeholders(generated.content) == set(), generated.path

    def test_default_namespace(
        self, generator: ModuleGenerator, config: Config, memory_fs: MemoryFilesystem
    ) -> None:
        result = generator.generate(ModuleOptions(name="Posts"))
        provider = memory_fs.read_text(
            config.module_path("Posts") / "src/Providers/PostsServiceProvider.php"
        )

        assert "namespace App\\Modules\\Posts\\Providers;" in provider
        assert "Using namespace: App\\Modules\\Posts" in result.notes

    def test_custom_namespace(
        self, generator: ModuleGenerator, config: Config, memory_fs: MemoryFilesystem
    ) -> None:
        generator.generate(ModuleOptions(name="Posts", namespace="Acme\\Mods"))
        root = config.module_path("Posts")

        controller = memory_fs.read_text(root / "src/Http/Controllers/ApiController.php")
        manifest = json.loads(memory_fs.read_text(root / "composer.json"))
        assert "namespace Acme\\Mods\\Posts\\Http\\Controllers;" in controller
        assert manifest["autoload"]["psr-4"] == {"Acme\\Mods\\Posts\\": "src/"}

    @pytest.mark.parametrize("namespace", ["Acme\\Modules\\", "Acme\\Modules\\\\ "])
    def test_trailing_backslash_namespace_matches_autoload(
        self,
        generator: ModuleGenerator,
        config: Config,
        memory_fs: MemoryFilesystem,
        namespace: str,
    ) -> None:
        generator.generate(ModuleOptions(name="Posts", namespace=namespace))
        root = config.module_path("Posts")

        model = memory_fs.read_text(root / "src/Models/Post.php")
        manifest = json.loads(memory_fs.read_text(root / "composer.json"))
        assert "namespace Acme\\Modules\\Posts\\Models;" in model
        assert "\\\\" not in model
        assert manifest["autoload"]["psr-4"] == {"Acme\\Modules\\Posts\\": "src/"}

    def test_trailing_backslash_default_namespace(self, memory_fs: MemoryFilesystem) -> None:
        config = Config(base_path=APP_ROOT, default_namespace="Acme\\Modules\\")
        ModuleGenerator(config, filesystem=memory_fs).generate(ModuleOptions(name="Posts"))

        provider = memory_fs.read_text(
            config.module_path("Posts") / "src/Providers/PostsServiceProvider.php"
        )
        assert "namespace Acme\\Modules\\Posts\\Providers;" in provider

    def test_manifest_is_data_not_template(self, generator: ModuleGenerator) -> None:
        result = generator.generate(ModuleOptions(name="Posts"))
        manifest = result.files[0]

        assert manifest.template == ""
        assert json.loads(manifest.content)["name"] == "hypervel/module-posts"

    def test_reports_steps(self, generator: ModuleGenerator) -> None:
        result = generator.generate(ModuleOptions(name="Posts"))
        assert result.messages[0] == "Created module directory structure"
        assert "Created middleware" in result.messages
        assert "Don't forget to run: composer dump-autoload" in result.notes


class TestExistingModule:
    def test_second_run_rejected_without_writes(
        self, generator: ModuleGenerator, memory_fs: MemoryFilesystem
    ) -> None:
        generator.generate(ModuleOptions(name="Posts"))
        writes_before = list(memory_fs.writes)

        with pytest.raises(ModuleAlreadyExists) as excinfo:
            generator.generate(ModuleOptions(name="Posts"))

        assert "already exists" in str(excinfo.value)
        assert memory_fs.writes == writes_before

    def test_pre_existing_directory_rejected(
        self, generator: ModuleGenerator, config: Config, memory_fs: MemoryFilesystem
    ) -> None:
        memory_fs.make_dirs(config.module_path("Posts"))

        with pytest.raises(ModuleAlreadyExists):
            generator.generate(ModuleOptions(name="Posts"))
        assert memory_fs.writes == []


class TestMissingStub:
    def test_earlier_files_are_kept_and_reported(
        self, config: Config, memory_fs: MemoryFilesystem, missing_stub
    ) -> None:
        generator = ModuleGenerator(config, renderer=missing_stub("config"), filesystem=memory_fs)
        root = config.module_path("Posts")

        with pytest.raises(TemplateNotFound) as excinfo:
            generator.generate(ModuleOptions(name="Posts"))

        kept = [root / rel for rel in EXPECTED_FILES[:3]]
        assert excinfo.value.partial is not None
        assert excinfo.value.partial.paths == kept
        assert memory_fs.writes == kept
