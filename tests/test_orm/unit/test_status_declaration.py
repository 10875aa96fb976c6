"""状态声明参数与冲突测试

使用不映射到数据库的普通类测试 has_statuses 的声明阶段行为：
1. 参数校验（标签、列名、校验注册表）
2. 方法名冲突，冲突时不修改模型
3. 空状态列表
4. 多列与继承
5. 全局默认选项
"""

import pytest

from statusable.orm import (
    ValidatableMixin,
    StatusConfig,
    StatusConfigurationError,
    StatusMethodConflictError,
    configure_statuses,
    get_status_sets,
    has_statuses,
)


def make_model(name: str = "PlainRecord", **attrs):
    """创建带校验注册表的普通模型类"""
    namespace = {"status": None}
    namespace.update(attrs)
    return type(name, (ValidatableMixin,), namespace)


class TestLabelArguments:
    """标签参数测试"""

    def test_labels_required(self):
        """测试缺少标签"""
        with pytest.raises(StatusConfigurationError) as exc_info:
            has_statuses(make_model(), None)
        assert "required" in exc_info.value.reason

    def test_bare_string_rejected(self):
        """测试单个字符串不被当作标签列表"""
        with pytest.raises(StatusConfigurationError):
            has_statuses(make_model(), "Pending")

    def test_non_string_label(self):
        """测试非字符串标签"""
        with pytest.raises(StatusConfigurationError):
            has_statuses(make_model(), ["Pending", 1])

    def test_blank_label(self):
        """测试空白标签"""
        with pytest.raises(StatusConfigurationError):
            has_statuses(make_model(), ["Pending", "   "])

    def test_label_without_suffix(self):
        """测试无法生成方法名的标签"""
        model = make_model()
        with pytest.raises(StatusConfigurationError) as exc_info:
            has_statuses(model, ["Pending", "!!!"])

        assert exc_info.value.model is model
        assert not hasattr(model, "for_status")

    def test_nested_labels_flattened(self):
        """测试嵌套列表展开"""
        model = make_model()
        status_set = has_statuses(model, [["Pending", ["Running"]], "Completed"])
        assert status_set.labels == ("Pending", "Running", "Completed")
        assert model.status_options == ("Pending", "Running", "Completed")

    def test_tuple_labels(self):
        """测试元组标签"""
        model = make_model()
        has_statuses(model, ("Pending", "Running"))
        assert model.humanized_statuses_list == "Pending or Running"


class TestColumnArguments:
    """列名与模型参数测试"""

    def test_undeclared_column(self):
        """测试模型未声明的列"""
        with pytest.raises(StatusConfigurationError) as exc_info:
            has_statuses(make_model(), ["Pending"], col_name="missing_state")
        assert "missing_state" in str(exc_info.value)

    def test_invalid_column_name(self):
        """测试非法列名"""
        with pytest.raises(StatusConfigurationError):
            has_statuses(make_model(), ["Pending"], col_name="not valid")

    def test_annotation_only_column(self):
        """测试只有类型注解的列"""
        model = type(
            "AnnotatedRecord",
            (ValidatableMixin,),
            {"__annotations__": {"stage": str}},
        )
        has_statuses(model, ["Draft"], col_name="stage")
        assert model.stage_draft == "Draft"

    def test_method_is_not_a_column(self):
        """测试方法名不能作为列名"""
        def refresh(self):
            return "reloaded"

        model = make_model(refresh=refresh)
        with pytest.raises(StatusConfigurationError):
            has_statuses(model, ["A", "B"], col_name="refresh")

        assert not hasattr(model, "for_refresh")
        assert model().refresh() == "reloaded"

    def test_descriptor_is_not_a_column(self):
        """测试 property 和 classmethod 不能作为列名"""
        model = make_model(
            stage=property(lambda self: "Draft"),
            build=classmethod(lambda cls: None),
        )
        for col_name in ("stage", "build"):
            with pytest.raises(StatusConfigurationError):
                has_statuses(model, ["Draft"], col_name=col_name)
        assert get_status_sets(model) == {}

    def test_model_without_validation_registry(self):
        """测试没有校验注册表的类"""
        model = type("NoRegistry", (), {"status": None})
        with pytest.raises(StatusConfigurationError) as exc_info:
            has_statuses(model, ["Pending"])
        assert "validation registry" in exc_info.value.reason

    def test_instance_rejected(self):
        """测试传入实例而非类"""
        with pytest.raises(StatusConfigurationError):
            has_statuses(make_model()(), ["Pending"])


class TestMethodConflicts:
    """方法名冲突测试"""

    def test_duplicate_suffix(self):
        """测试两个标签生成相同后缀"""
        model = make_model()
        with pytest.raises(StatusMethodConflictError):
            has_statuses(model, ["Not Ready", "not-ready"])
        assert not hasattr(model, "status_options")

    def test_existing_attribute(self):
        """测试生成的名字覆盖已有属性"""
        def is_status_pending(self):
            return "custom"

        model = make_model(is_status_pending=is_status_pending)
        with pytest.raises(StatusMethodConflictError) as exc_info:
            has_statuses(model, ["Pending", "Running"])

        assert exc_info.value.names == ("is_status_pending",)
        assert not hasattr(model, "for_status")
        assert model().is_status_pending() == "custom"
        assert model.get_validators() == []

    def test_same_column_twice(self):
        """测试同一列重复声明"""
        model = make_model()
        has_statuses(model, ["Pending", "Running"])

        with pytest.raises(StatusMethodConflictError):
            has_statuses(model, ["Archived"])

        assert model.status_options == ("Pending", "Running")
        assert not hasattr(model, "status_archived")
        assert len(model.get_validators()) == 1

    def test_label_collides_with_collection_name(self):
        """测试标签常量与集合常量同名"""
        model = make_model()
        with pytest.raises(StatusMethodConflictError) as exc_info:
            has_statuses(model, ["Options"])
        assert "status_options" in exc_info.value.names

    def test_conflict_message(self):
        """测试冲突异常消息"""
        model = make_model("Order", status_pending="x")
        with pytest.raises(StatusMethodConflictError) as exc_info:
            has_statuses(model, ["Pending"])
        assert "Order" in str(exc_info.value)
        assert "status_pending" in str(exc_info.value)


class TestEmptyLabels:
    """空状态列表测试"""

    def test_empty_set(self):
        """测试空列表生成集合方法"""
        model = make_model()
        status_set = has_statuses(model, [])

        assert status_set.labels == ()
        assert model.status_options == ()
        assert model.humanized_statuses_list == ""
        assert callable(model.for_status)

    def test_empty_set_predicates(self):
        """测试空列表的判断与校验"""
        model = make_model()
        has_statuses(model, [])

        record = model()
        record.status = "Anything"
        assert record.is_status("Anything") is True
        assert record.is_status([]) is False
        assert record.validate() is False
        assert record.errors["status"] == ["must be one of "]

        record.status = None
        assert record.validate() is True


class TestMultipleColumns:
    """多列与继承测试"""

    def test_two_columns(self):
        """测试同一模型两个状态列"""
        model = make_model(phase=None)
        has_statuses(model, ["Pending", "Done"])
        has_statuses(model, ["Build", "Ship"], col_name="phase", validate_presence=True)

        record = model()
        record.set_status_done().set_phase_ship()
        assert record.is_status_done() is True
        assert record.is_phase_ship() is True
        assert list(get_status_sets(model)) == ["status", "phase"]

    def test_subclass_declaration_does_not_touch_parent(self):
        """测试子类声明不影响父类"""
        parent = make_model("ParentRecord", phase=None)
        has_statuses(parent, ["Pending"])

        child = type("ChildRecord", (parent,), {})
        has_statuses(child, ["Build"], col_name="phase")

        assert list(get_status_sets(parent)) == ["status"]
        assert list(get_status_sets(child)) == ["status", "phase"]
        assert not hasattr(parent, "phase_build")
        assert len(parent.get_validators()) == 1
        assert len(child.get_validators()) == 2

    def test_subclass_inherits_generated_methods(self):
        """测试子类继承生成的方法"""
        parent = make_model("BaseRecord")
        has_statuses(parent, ["Pending"])

        child = type("DerivedRecord", (parent,), {})
        record = child()
        record.set_status_pending()
        assert record.is_status_pending() is True


class TestDefaultOptions:
    """全局默认选项测试"""

    def test_builtin_defaults(self):
        """测试内置默认值"""
        status_set = has_statuses(make_model(), ["Pending"])
        assert status_set.col_name == "status"
        assert status_set.validate_presence is False
        assert status_set.validate_inclusion is True

    def test_configured_defaults(self):
        """测试修改全局默认值"""
        configure_statuses(default_col_name="state", validate_presence=True, validate_inclusion=False)
        model = make_model(state=None)

        status_set = has_statuses(model, ["Draft"])
        assert status_set.col_name == "state"
        assert model.state_draft == "Draft"

        record = model()
        assert record.validate() is False
        assert record.errors["state"] == ["can't be blank"]

        record.state = "Unlisted"
        assert record.validate() is True

    def test_explicit_options_win(self):
        """测试显式参数优先于全局默认值"""
        configure_statuses(validate_inclusion=False)
        status_set = has_statuses(make_model(), ["Pending"], validate_inclusion=True)
        assert status_set.validate_inclusion is True

    def test_reset(self):
        """测试重置"""
        configure_statuses(default_col_name="state")
        StatusConfig.reset()
        assert StatusConfig.get_default_col_name() == "status"
