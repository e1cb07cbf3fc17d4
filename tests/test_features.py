"""Tests for loading the feature table."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from pkg_infra.config import DEFAULT_TEMPLATES_DIR
from pkg_infra.core.errors import FeatureConfigError, MissingDependency
from pkg_infra.scaffolding import (
    FieldSpec,
    FileMode,
    ScaffoldFeature,
    load_feature_specs,
)


class TestBundledFeatureTable:

    def test_every_feature_defined(self) -> None:
        specs = load_feature_specs()

        assert set(specs) == set(ScaffoldFeature)

    def test_testthat(self) -> None:
        spec = load_feature_specs()[ScaffoldFeature.TEST_HARNESS]

        assert "tests/testthat.R" in spec.sentinels
        assert spec.directories == ("tests/testthat",)
        assert spec.files[0].target == "tests/testthat.R"
        assert spec.files[0].mode is FileMode.RENDER
        assert spec.fields == (FieldSpec("Suggests", "testthat"),)
        assert spec.build_ignore == ()

    def test_knitr_and_rcpp_have_no_precondition(self) -> None:
        specs = load_feature_specs()

        assert specs[ScaffoldFeature.DOC_GENERATION].sentinels == ()
        assert specs[ScaffoldFeature.NATIVE_EXTENSION].sentinels == ()

    def test_rcpp_fields(self) -> None:
        spec = load_feature_specs()[ScaffoldFeature.NATIVE_EXTENSION]

        assert spec.fields == (FieldSpec("LinkingTo", "Rcpp"), FieldSpec("Imports", "Rcpp"))

    def test_knitr_message_mentions_vignette_engine(self) -> None:
        spec = load_feature_specs()[ScaffoldFeature.DOC_GENERATION]

        assert "%\\VignetteEngine{knitr::knitr}" in spec.message

    def test_copied_files_use_copy_mode(self) -> None:
        specs = load_feature_specs()

        assert specs[ScaffoldFeature.IDE_PROJECT].files[0].mode is FileMode.COPY
        assert specs[ScaffoldFeature.CONTINUOUS_INTEGRATION].files[0].mode is FileMode.COPY


class TestInvalidFeatureTable:

    @pytest.fixture()
    def table(self, tmp_path: Path) -> Path:
        path = tmp_path / "features.yaml"
        shutil.copy(DEFAULT_TEMPLATES_DIR / "features.yaml", path)
        return path

    def test_missing_table(self, tmp_path: Path) -> None:
        with pytest.raises(MissingDependency):
            load_feature_specs(tmp_path / "features.yaml")

    def test_invalid_yaml(self, table: Path) -> None:
        table.write_text("testthat: [unclosed\n")

        with pytest.raises(FeatureConfigError):
            load_feature_specs(table)

    def test_missing_feature(self, table: Path) -> None:
        text = table.read_text()
        table.write_text(text.replace("\ntravis:", "\nnot_travis:"))

        with pytest.raises(FeatureConfigError) as exc_info:
            load_feature_specs(table)

        assert "travis" in exc_info.value.message

    def test_bad_file_mode(self, table: Path) -> None:
        table.write_text(table.read_text().replace("mode: copy", "mode: symlink", 1))

        with pytest.raises(FeatureConfigError):
            load_feature_specs(table)

    def test_list_of_non_strings(self, table: Path) -> None:
        table.write_text(table.read_text().replace("    - src\n", "    - {a: 1}\n"))

        with pytest.raises(FeatureConfigError):
            load_feature_specs(table)
