"""
Descriptor navigator.

Locates the mirror declaration and the release listings inside a parsed
descriptor. Every lookup step is a hard precondition: a missing element,
children collection or attribute raises DescriptorError immediately.
"""

from typing import List

from flexsdk_setup.descriptor_models import DescriptorElement, SdkRelease
from flexsdk_setup.flexsdk_setup_exceptions import DescriptorError
from flexsdk_setup.flexsdk_setup_utils import PlatformId

ROOT_ELEMENT = "config"
MIRROR_ELEMENT = "mirror"
MIRROR_CGI_NAME = "MirrorURLCGI"
PRODUCTS_ELEMENT = "products"
VERSIONS_ELEMENT = "versions"
AIR_SDK_ELEMENT = "airsdk"
FLEX_SDK_PRODUCT = "ApacheFlexSDK"

AIR_PLATFORM_ELEMENTS = {
    PlatformId.MAC: "mac",
    PlatformId.WINDOWS: "windows",
}


class DescriptorNavigator:
    """
    Walks a descriptor tree rooted at the config element.
    """

    def __init__(self, root: DescriptorElement):
        if not isinstance(root, DescriptorElement) or root.name != ROOT_ELEMENT:
            raise DescriptorError()
        self.root = root

    @staticmethod
    def _require_child(element: DescriptorElement, name: str) -> DescriptorElement:
        child = element.get_child(name)
        if child is None:
            raise DescriptorError()
        return child

    @staticmethod
    def _require_attribute(element: DescriptorElement, key: str) -> str:
        value = element.get_attribute(key)
        if value is None:
            raise DescriptorError()
        return value

    @staticmethod
    def _require_children(element: DescriptorElement) -> List[DescriptorElement]:
        children = element.child_elements()
        if not children:
            raise DescriptorError()
        return children

    def get_mirror_cgi_file(self) -> str:
        """
        Returns the file attribute of the mirror entry named MirrorURLCGI.

        The entry is a child of the mirror section:
        config -> mirror -> <element name="MirrorURLCGI" file="...">
        """
        mirror_section = self._require_child(self.root, MIRROR_ELEMENT)
        for entry in self._require_children(mirror_section):
            if entry.get_attribute("name") == MIRROR_CGI_NAME:
                return self._require_attribute(entry, "file")
        raise DescriptorError()

    def get_product_releases(self, product: str = FLEX_SDK_PRODUCT) -> List[SdkRelease]:
        """
        Returns the releases of a product, in descriptor order.

        config -> products -> <product> -> versions -> <release>*
        """
        products = self._require_child(self.root, PRODUCTS_ELEMENT)
        product_element = self._require_child(products, product)
        return self._read_releases(product_element)

    def get_air_releases(self, platform_id: PlatformId) -> List[SdkRelease]:
        """
        Returns the AIR SDK releases for a platform, in descriptor order.

        config -> airsdk -> <mac|windows> -> versions -> <release>*
        """
        air_sdk = self._require_child(self.root, AIR_SDK_ELEMENT)
        platform_element = self._require_child(air_sdk, AIR_PLATFORM_ELEMENTS[platform_id])
        return self._read_releases(platform_element)

    def _read_releases(self, element: DescriptorElement) -> List[SdkRelease]:
        versions = self._require_child(element, VERSIONS_ELEMENT)
        return [
            SdkRelease(
                version=self._require_attribute(entry, "version"),
                path=self._require_attribute(entry, "path"),
                file=self._require_attribute(entry, "file"),
            )
            for entry in self._require_children(versions)
        ]
