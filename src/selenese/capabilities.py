"""The default capability set: the legacy Selenium RC browser API by name and arity.

Every entry takes only string arguments, so the name and the argument count
are all the catalog needs to derive its commands. Methods that are also in
the reserved-name list (``start``, ``stop``, ``pause`` ...) are listed here
as the API has them; the catalog skips them.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from selenese.models import CapabilityMethod


def _methods(arity: int, names: Iterable[str]) -> Tuple[CapabilityMethod, ...]:
    return tuple(CapabilityMethod(name=name, arity=arity) for name in names)


_NULLARY = (
    "start",
    "stop",
    "showContextualBanner",
    "shiftKeyDown",
    "shiftKeyUp",
    "metaKeyDown",
    "metaKeyUp",
    "altKeyDown",
    "altKeyUp",
    "controlKeyDown",
    "controlKeyUp",
    "getSpeed",
    "getLog",
    "deselectPopUp",
    "chooseCancelOnNextConfirmation",
    "chooseOkOnNextConfirmation",
    "goBack",
    "refresh",
    "close",
    "isAlertPresent",
    "isPromptPresent",
    "isConfirmationPresent",
    "getAlert",
    "getConfirmation",
    "getPrompt",
    "getLocation",
    "getTitle",
    "getBodyText",
    "getAllButtons",
    "getAllLinks",
    "getAllFields",
    "getMouseSpeed",
    "windowFocus",
    "windowMaximize",
    "getAllWindowIds",
    "getAllWindowNames",
    "getAllWindowTitles",
    "getHtmlSource",
    "getCookie",
    "deleteAllVisibleCookies",
    "captureScreenshotToString",
    "shutDownSeleniumServer",
    "retrieveLastRemoteControlLogs",
)

_UNARY = (
    "setExtensionJs",
    "click",
    "doubleClick",
    "contextMenu",
    "focus",
    "mouseOver",
    "mouseOut",
    "mouseDown",
    "mouseDownRight",
    "mouseUp",
    "mouseUpRight",
    "mouseMove",
    "setSpeed",
    "check",
    "uncheck",
    "removeAllSelections",
    "submit",
    "open",
    "selectWindow",
    "selectPopUp",
    "selectFrame",
    "answerOnNextPrompt",
    "getValue",
    "getText",
    "highlight",
    "getEval",
    "isChecked",
    "getTable",
    "getSelectedLabels",
    "getSelectedLabel",
    "getSelectedValues",
    "getSelectedValue",
    "getSelectedIndexes",
    "getSelectedIndex",
    "getSelectedIds",
    "getSelectedId",
    "isSomethingSelected",
    "getSelectOptions",
    "getAttribute",
    "isTextPresent",
    "isElementPresent",
    "isVisible",
    "isEditable",
    "getAttributeFromAllWindows",
    "setMouseSpeed",
    "getElementIndex",
    "getElementPositionLeft",
    "getElementPositionTop",
    "getElementWidth",
    "getElementHeight",
    "getCursorPosition",
    "getExpression",
    "getXpathCount",
    "getCssCount",
    "allowNativeXpath",
    "ignoreAttributesWithoutValue",
    "setTimeout",
    "waitForPageToLoad",
    "getCookieByName",
    "isCookiePresent",
    "setBrowserLogLevel",
    "runScript",
    "removeScript",
    "useXpathLibrary",
    "setContext",
    "captureScreenshot",
    "captureNetworkTraffic",
    "captureEntirePageScreenshotToString",
    "keyDownNative",
    "keyUpNative",
    "keyPressNative",
)

_BINARY = (
    "clickAt",
    "doubleClickAt",
    "contextMenuAt",
    "fireEvent",
    "keyPress",
    "keyDown",
    "keyUp",
    "mouseDownAt",
    "mouseDownRightAt",
    "mouseUpAt",
    "mouseUpRightAt",
    "mouseMoveAt",
    "type",
    "typeKeys",
    "select",
    "addSelection",
    "removeSelection",
    "openWindow",
    "getWhetherThisFrameMatchFrameExpression",
    "getWhetherThisWindowMatchWindowExpression",
    "waitForPopUp",
    "dragdrop",
    "dragAndDrop",
    "dragAndDropToObject",
    "setCursorPosition",
    "isOrdered",
    "assignId",
    "waitForCondition",
    "waitForFrameToLoad",
    "createCookie",
    "deleteCookie",
    "addLocationStrategy",
    "captureEntirePageScreenshot",
    "rollup",
    "addScript",
    "attachFile",
    "addCustomRequestHeader",
)

SELENIUM_CAPABILITIES: Tuple[CapabilityMethod, ...] = (
    _methods(0, _NULLARY) + _methods(1, _UNARY) + _methods(2, _BINARY)
)
