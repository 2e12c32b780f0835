from data_designer.plugins.plugin import Plugin, PluginType

algorithm_selector_plugin = Plugin(
    config_qualified_name="data_designer_match_selector.config.AlgorithmSelectorColumnConfig",
    impl_qualified_name="data_designer_match_selector.generator.AlgorithmSelectorColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
