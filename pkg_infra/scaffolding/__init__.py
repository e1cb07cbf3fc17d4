"""Infrastructure features and the operation that adds them.

Public API:
    ScaffoldOperation: Add one feature to a package
    use_testthat, use_rstudio, use_knitr, use_rcpp, use_travis: Shortcuts

Example:
    from pkg_infra.scaffolding import use_testthat

    use_testthat("path/to/mypkg")
"""

from .features import load_feature_specs
from .operation import (
    ScaffoldOperation,
    add_rstudio_project,
    add_test_infrastructure,
    add_travis,
    run_feature,
    use_knitr,
    use_rcpp,
    use_rstudio,
    use_testthat,
    use_travis,
)
from .types import FeatureSpec, FieldSpec, FileMode, FileSpec, ScaffoldFeature, ScaffoldResult

__all__ = [
    "ScaffoldOperation",
    "run_feature",
    "load_feature_specs",
    "use_testthat",
    "use_rstudio",
    "use_knitr",
    "use_rcpp",
    "use_travis",
    "add_test_infrastructure",
    "add_rstudio_project",
    "add_travis",
    "FeatureSpec",
    "FieldSpec",
    "FileMode",
    "FileSpec",
    "ScaffoldFeature",
    "ScaffoldResult",
]
