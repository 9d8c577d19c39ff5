"""Section markers found in a project.pbxproj file."""

BEGIN_BUILD_FILE = "/* Begin PBXBuildFile section */"
END_BUILD_FILE = "/* End PBXBuildFile section */"
BEGIN_FILE_REFERENCE = "/* Begin PBXFileReference section */"
END_FILE_REFERENCE = "/* End PBXFileReference section */"
BEGIN_FRAMEWORKS_BUILD_PHASE = "/* Begin PBXFrameworksBuildPhase section */"
END_FRAMEWORKS_BUILD_PHASE = "/* End PBXFrameworksBuildPhase section */"
BEGIN_GROUP = "/* Begin PBXGroup section */"
END_GROUP = "/* End PBXGroup section */"
BEGIN_NATIVE_TARGET = "/* Begin PBXNativeTarget section */"
END_NATIVE_TARGET = "/* End PBXNativeTarget section */"
BEGIN_PROJECT = "/* Begin PBXProject section */"
END_PROJECT = "/* End PBXProject section */"
BEGIN_RESOURCES_BUILD_PHASE = "/* Begin PBXResourcesBuildPhase section */"
END_RESOURCES_BUILD_PHASE = "/* End PBXResourcesBuildPhase section */"
BEGIN_SOURCES_BUILD_PHASE = "/* Begin PBXSourcesBuildPhase section */"
END_SOURCES_BUILD_PHASE = "/* End PBXSourcesBuildPhase section */"
BEGIN_VARIANT_GROUP = "/* Begin PBXVariantGroup section */"
END_VARIANT_GROUP = "/* End PBXVariantGroup section */"
BEGIN_BUILD_CONFIGURATION = "/* Begin XCBuildConfiguration section */"
END_BUILD_CONFIGURATION = "/* End XCBuildConfiguration section */"
BEGIN_CONFIGURATION_LIST = "/* Begin XCConfigurationList section */"
END_CONFIGURATION_LIST = "/* End XCConfigurationList section */"
BEGIN_CONTAINER_ITEM_PROXY = "/* Begin PBXContainerItemProxy section */"
END_CONTAINER_ITEM_PROXY = "/* End PBXContainerItemProxy section */"