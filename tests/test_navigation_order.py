from docnav.models.configs import NavigationConfig
from docnav.models.document import Document
from docnav.navigation.order import FolderConfig, FolderMeta, OrderResolver
from docnav.navigation.tree_builder import build_tree


def test_leaves_sort_by_index_then_catalog_position():
    catalog = [
        Document(slug="zeta", title="Zeta", index=1),
        Document(slug="beta", title="Beta", index=0),
        Document(slug="alpha", title="Alpha", index=1),
        Document(slug="gamma", title="Gamma", index=-2),
    ]
    root = build_tree(catalog).root

    ordered = OrderResolver().order_children(root)

    # Equal indexes keep catalog order rather than sorting by title.
    assert [leaf.slug for leaf in ordered.leaves] == ["gamma", "beta", "zeta", "alpha"]
    assert ordered.folders == []


def test_folders_sort_by_configured_order_then_name():
    catalog = [
        Document(slug="reference/api"),
        Document(slug="guide/setup"),
        Document(slug="Appendix/notes"),
        Document(slug="faq/general"),
        Document(slug="intro"),
    ]
    root = build_tree(catalog).root
    config = FolderConfig(
        {
            "guide": FolderMeta(display_name="User Guide", order=1),
            "reference": FolderMeta(display_name="Reference", order=2),
        }
    )

    ordered = OrderResolver(config).order_children(root)

    assert [leaf.slug for leaf in ordered.leaves] == ["intro"]
    # Unconfigured folders share rank 999 and fall back to case-sensitive names.
    assert [folder.name for folder in ordered.folders] == ["guide", "reference", "Appendix", "faq"]


def test_order_children_does_not_mutate_tree():
    root = build_tree([Document(slug="b", index=2), Document(slug="a", index=1), Document(slug="dir/x")]).root
    before = list(root.children)

    OrderResolver().order_children(root)

    assert list(root.children) == before


def test_unconfigured_folder_gets_humanized_name_and_default_rank():
    meta = FolderConfig().resolve("getting-started_guide")

    assert meta == FolderMeta(display_name="getting started guide", order=999)


def test_folder_config_from_navigation_config():
    config = NavigationConfig.model_validate(
        {
            "folders": {
                "guide": {"displayName": "User Guide", "order": 1},
                "how_to": {"order": 5},
            }
        }
    )

    folders = FolderConfig.from_navigation_config(config)

    assert set(folders.entries) == {"guide", "how_to"}
    assert folders.resolve("guide") == FolderMeta(display_name="User Guide", order=1)
    assert folders.resolve("how_to") == FolderMeta(display_name="how to", order=5)
